"""StorageBackend protocol — typed key-value persistence for one namespace."""

from __future__ import annotations

from abc import ABC, abstractmethod


class StorageBackend(ABC):
    """Abstract base for the two storage strategies.

    A backend is bound to a single namespace at construction time, so no
    operation takes one.  Getters return *default* both for absent keys
    and for stored values that cannot be read as the requested type.
    """

    #: Short identifier used in configuration and logs.
    name: str = ""

    @abstractmethod
    def set_int(self, key: str, value: int) -> None:
        """Create or overwrite an integer entry."""
        ...

    @abstractmethod
    def get_int(self, key: str, default: int) -> int: ...

    @abstractmethod
    def set_float(self, key: str, value: float) -> None:
        """Create or overwrite a float entry."""
        ...

    @abstractmethod
    def get_float(self, key: str, default: float) -> float: ...

    @abstractmethod
    def set_string(self, key: str, value: str) -> None:
        """Create or overwrite a string entry."""
        ...

    @abstractmethod
    def get_string(self, key: str, default: str) -> str: ...

    @abstractmethod
    def has_key(self, key: str) -> bool:
        """Return ``True`` if an entry exists for *key*."""
        ...

    @abstractmethod
    def delete_key(self, key: str) -> None:
        """Delete an entry.  No-op if the key does not exist."""
        ...

    @abstractmethod
    def delete_all(self) -> None:
        """Delete every entry in the namespace."""
        ...
