# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Backend factory for creating storage backends from configuration.

Uses the Registry pattern to map backend and native-store type strings
to builders, allowing extensibility without modifying factory code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import ClassVar

from prefstore._internal.sync import DurableSync, IdbfsSync, NoopSync
from prefstore.backends import (
    InMemoryPreferences,
    NativePreferenceBackend,
    PlatformPreferences,
    SQLitePreferences,
    StorageBackend,
    VirtualFileBackend,
)
from prefstore.exceptions import PreferenceConfigError
from prefstore.namespace import Namespace
from prefstore.store import PreferenceStore

from .schema import NativeStoreConfigSchema, PreferencesConfig

logger = logging.getLogger(__name__)

def default_sqlite_root() -> Path:
    return Path.home() / ".prefstore"

PlatformBuilder = Callable[[PreferencesConfig], PlatformPreferences]


def is_browser_runtime() -> bool:
    """Return ``True`` when running inside a browser (Pyodide/Emscripten)."""
    return sys.platform == "emscripten"


def _memory_platform(config: PreferencesConfig) -> PlatformPreferences:
    return InMemoryPreferences()


def _sqlite_platform(config: PreferencesConfig) -> PlatformPreferences:
    native: NativeStoreConfigSchema = config.native
    if native.path:
        db_path = Path(native.path)
    else:
        home = Namespace.from_identity(
            config.organization, config.application, mount_point=default_sqlite_root()
        )
        db_path = home.path / "prefs.db"
    return SQLitePreferences(db_path)


class BackendFactory:
    """Creates storage backends from configuration.

    The backend is decided exactly once per call to :meth:`create`:
    ``"native"`` and ``"file"`` are taken as given, ``"auto"`` picks the
    file backend inside a browser runtime and the native backend
    everywhere else.

    Example:
        factory = BackendFactory()
        backend = factory.create(
            PreferencesConfig(organization="My Co", application="Game", backend="file"),
        )
    """

    # Class-level registry mapping native store types to builders
    _platforms: ClassVar[dict[str, PlatformBuilder]] = {
        "memory": _memory_platform,
        "sqlite": _sqlite_platform,
    }

    @classmethod
    def register(cls, type_name: str, builder: PlatformBuilder) -> None:
        """Register a native store builder under *type_name*."""
        cls._platforms[type_name] = builder

    @classmethod
    def registered_types(cls) -> list[str]:
        return list(cls._platforms.keys())

    def resolve_backend_name(self, config: PreferencesConfig) -> str:
        if config.backend != "auto":
            return config.backend
        return "file" if is_browser_runtime() else "native"

    def create(
        self,
        config: PreferencesConfig,
        sync: DurableSync | None = None,
        platform: PlatformPreferences | None = None,
    ) -> StorageBackend:
        """Build the backend selected by *config*.

        Args:
            config: Preferences configuration
            sync: Durable sync for the file backend.  Defaults to IDBFS
                  sync in a browser runtime and a no-op elsewhere.
            platform: Platform store for the native backend, overriding
                      ``config.native``.  Useful for testing.

        Raises:
            PreferenceConfigError: If the native store type is unknown.
        """
        name = self.resolve_backend_name(config)
        if name == "file":
            backend: StorageBackend = self._create_file(config, sync)
        else:
            backend = NativePreferenceBackend(platform or self._create_platform(config))
        logger.debug(
            "Selected %s preference backend for %s/%s",
            backend.name,
            config.organization,
            config.application,
        )
        return backend

    def _create_file(
        self, config: PreferencesConfig, sync: DurableSync | None
    ) -> VirtualFileBackend:
        namespace = Namespace.from_identity(
            config.organization, config.application, mount_point=config.mount_point
        )
        if sync is None:
            sync = IdbfsSync() if is_browser_runtime() else NoopSync()
        return VirtualFileBackend(namespace, sync=sync)

    def _create_platform(self, config: PreferencesConfig) -> PlatformPreferences:
        builder = self._platforms.get(config.native.type)
        if builder is None:
            available = ", ".join(sorted(self._platforms.keys()))
            raise PreferenceConfigError(
                f"Unknown native store type '{config.native.type}'. Available: {available}"
            )
        return builder(config)


def create_store(
    config: PreferencesConfig,
    sync: DurableSync | None = None,
    platform: PlatformPreferences | None = None,
) -> PreferenceStore:
    """Convenience wrapper: build a :class:`PreferenceStore` from *config*."""
    return PreferenceStore(BackendFactory().create(config, sync=sync, platform=platform))
