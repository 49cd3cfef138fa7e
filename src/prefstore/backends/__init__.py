"""Storage backends for typed preference persistence."""

from prefstore.backends.base import StorageBackend
from prefstore.backends.file import VirtualFileBackend
from prefstore.backends.memory import InMemoryPreferences
from prefstore.backends.native import NativePreferenceBackend, PlatformPreferences
from prefstore.backends.sqlite import SQLitePreferences

__all__ = [
    "InMemoryPreferences",
    "NativePreferenceBackend",
    "PlatformPreferences",
    "SQLitePreferences",
    "StorageBackend",
    "VirtualFileBackend",
]
