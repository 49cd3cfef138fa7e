"""NativePreferenceBackend — verbatim delegation to a host preference API."""

from __future__ import annotations

from typing import Protocol

from prefstore.backends.base import StorageBackend


class PlatformPreferences(Protocol):
    """Typed preference API offered by the host platform.

    Implementations are already namespaced and already persistent.  An
    entry written as one type and read as another returns the default.
    """

    def set_int(self, key: str, value: int) -> None: ...

    def get_int(self, key: str, default: int) -> int: ...

    def set_float(self, key: str, value: float) -> None: ...

    def get_float(self, key: str, default: float) -> float: ...

    def set_string(self, key: str, value: str) -> None: ...

    def get_string(self, key: str, default: str) -> str: ...

    def has_key(self, key: str) -> bool: ...

    def delete_key(self, key: str) -> None: ...

    def delete_all(self) -> None: ...


class NativePreferenceBackend(StorageBackend):
    """Backend that forwards every call to a :class:`PlatformPreferences`."""

    name = "native"

    def __init__(self, platform: PlatformPreferences) -> None:
        self._platform = platform

    @property
    def platform(self) -> PlatformPreferences:
        return self._platform

    def set_int(self, key: str, value: int) -> None:
        self._platform.set_int(key, value)

    def get_int(self, key: str, default: int) -> int:
        return self._platform.get_int(key, default)

    def set_float(self, key: str, value: float) -> None:
        self._platform.set_float(key, value)

    def get_float(self, key: str, default: float) -> float:
        return self._platform.get_float(key, default)

    def set_string(self, key: str, value: str) -> None:
        self._platform.set_string(key, value)

    def get_string(self, key: str, default: str) -> str:
        return self._platform.get_string(key, default)

    def has_key(self, key: str) -> bool:
        return self._platform.has_key(key)

    def delete_key(self, key: str) -> None:
        self._platform.delete_key(key)

    def delete_all(self) -> None:
        self._platform.delete_all()
