"""InMemoryPreferences — zero-config, dict-backed platform store for development and testing."""

from __future__ import annotations

from typing import Any


class InMemoryPreferences:
    """In-memory typed preferences.  Data is lost on process exit."""

    def __init__(self) -> None:
        self._data: dict[str, tuple[str, Any]] = {}

    def _get(self, key: str, kind: str, default: Any) -> Any:
        entry = self._data.get(key)
        if entry is None or entry[0] != kind:
            return default
        return entry[1]

    def set_int(self, key: str, value: int) -> None:
        self._data[key] = ("int", int(value))

    def get_int(self, key: str, default: int) -> int:
        return self._get(key, "int", default)

    def set_float(self, key: str, value: float) -> None:
        self._data[key] = ("float", float(value))

    def get_float(self, key: str, default: float) -> float:
        return self._get(key, "float", default)

    def set_string(self, key: str, value: str) -> None:
        self._data[key] = ("string", value)

    def get_string(self, key: str, default: str) -> str:
        return self._get(key, "string", default)

    def has_key(self, key: str) -> bool:
        return key in self._data

    def delete_key(self, key: str) -> None:
        self._data.pop(key, None)

    def delete_all(self) -> None:
        self._data.clear()
