# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Configuration models for building a preference store.

A host application supplies its identity once at startup; everything
else has a default that selects the right backend for the runtime.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from prefstore.namespace import DEFAULT_MOUNT_POINT


class NativeStoreConfigSchema(BaseModel):
    """Platform preference store used by the native backend.

    Attributes:
        type: Store type ("memory" or "sqlite")
        path: Path to the SQLite database file (for sqlite type).  When
              empty, a per-application file under the user's home
              directory is used.
    """

    type: str = "memory"
    path: str = ""


class PreferencesConfig(BaseModel):
    """Top-level preferences configuration.

    Attributes:
        organization: Organization name, sanitized into the namespace path
        application: Application name, sanitized into the namespace path
        backend: "native", "file", or "auto" to probe the runtime
        mount_point: Root of the persistent virtual filesystem
        native: Platform store settings for the native backend
    """

    organization: str
    application: str
    backend: Literal["auto", "native", "file"] = "auto"
    mount_point: str = DEFAULT_MOUNT_POINT
    native: NativeStoreConfigSchema = Field(default_factory=NativeStoreConfigSchema)
