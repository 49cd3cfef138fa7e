# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Configuration layer for prefstore.

Turns a :class:`PreferencesConfig` (built in code or loaded from JSON)
into a ready :class:`~prefstore.PreferenceStore`.

Usage:
    config = PreferencesConfig.model_validate_json(Path("prefs.json").read_text())
    store = create_store(config)
"""

from .factory import BackendFactory, create_store, is_browser_runtime
from .schema import NativeStoreConfigSchema, PreferencesConfig

__all__ = [
    "BackendFactory",
    "NativeStoreConfigSchema",
    "PreferencesConfig",
    "create_store",
    "is_browser_runtime",
]
