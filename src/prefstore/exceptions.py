"""Custom exceptions for the prefstore package."""

from __future__ import annotations


class PreferenceError(Exception):
    """Base exception for all preference-store errors."""


class InvalidKeyError(PreferenceError, ValueError):
    """Raised when a key cannot be mapped to a single file in the namespace."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        super().__init__(f"Invalid preference key {key!r}: {reason}")


class InvalidValueError(PreferenceError, ValueError):
    """Raised when a value does not fit the typed setter it was passed to."""

    def __init__(self, kind: str, value: object, reason: str) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"Invalid {kind} value {value!r}: {reason}")


class PreferenceConfigError(PreferenceError):
    """Raised when the preferences configuration cannot be turned into a backend."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Preferences misconfigured: {message}")


class BackendUnavailableError(PreferenceError):
    """Raised when a backend capability does not exist in the current runtime."""

    def __init__(self, capability: str, detail: str = "") -> None:
        self.capability = capability
        msg = f"Capability '{capability}' is unavailable"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
