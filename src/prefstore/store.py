"""PreferenceStore — the typed facade callers use."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prefstore import codec
from prefstore.exceptions import InvalidValueError

if TYPE_CHECKING:
    from prefstore._internal.sync import DurableSync
    from prefstore.backends.base import StorageBackend
    from prefstore.backends.native import PlatformPreferences
    from prefstore.config.schema import PreferencesConfig


class PreferenceStore:
    """Typed key-value preferences over a single injected backend.

    The backend is fixed for the lifetime of the store.  Reads never fail
    for a missing or unreadable entry: they return the caller's default.
    Environmental I/O errors raised by the backend propagate unchanged.

    Parameters:
        backend: Either a :class:`NativePreferenceBackend` or a
                 :class:`VirtualFileBackend`.

    Example:
        store = PreferenceStore.from_config(
            PreferencesConfig(organization="My Co", application="Game")
        )
        store.set_int("high_score", 1200)
        store.get_int("high_score")  # 1200
    """

    def __init__(self, backend: StorageBackend) -> None:
        self._backend = backend

    @classmethod
    def from_config(
        cls,
        config: PreferencesConfig,
        sync: DurableSync | None = None,
        platform: PlatformPreferences | None = None,
    ) -> PreferenceStore:
        """Build a store whose backend is selected from *config*."""
        from prefstore.config.factory import BackendFactory

        return cls(BackendFactory().create(config, sync=sync, platform=platform))

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    # ── integers ─────────────────────────────────────────────

    def set_int(self, key: str, value: int) -> None:
        if not codec.is_int32(value):
            raise InvalidValueError("int", value, "expected an int within 32-bit range")
        self._backend.set_int(key, value)

    def get_int(self, key: str, default: int = 0) -> int:
        return self._backend.get_int(key, default)

    # ── floats ───────────────────────────────────────────────

    def set_float(self, key: str, value: float) -> None:
        """Store *value* as a double.

        The full double range is kept, so values beyond 32-bit float range
        (``1e300``) and their precision round-trip unchanged.
        """
        if not codec.is_float(value):
            raise InvalidValueError("float", value, "expected a real number")
        self._backend.set_float(key, float(value))

    def get_float(self, key: str, default: float = 0.0) -> float:
        return self._backend.get_float(key, default)

    # ── strings ──────────────────────────────────────────────

    def set_string(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise InvalidValueError("string", value, "expected str")
        self._backend.set_string(key, value)

    def get_string(self, key: str, default: str = "") -> str:
        return self._backend.get_string(key, default)

    # ── entries ──────────────────────────────────────────────

    def has_key(self, key: str) -> bool:
        return self._backend.has_key(key)

    def delete_key(self, key: str) -> None:
        self._backend.delete_key(key)

    def delete_all(self) -> None:
        """Remove every entry in this store's namespace."""
        self._backend.delete_all()
