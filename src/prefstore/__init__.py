"""prefstore — typed, cross-platform application preferences.

One API for ints, floats and strings.  Entries live either in the host
platform's preference store or as one text file per key on a persistent
virtual filesystem, flushed to durable storage after every change.
"""

from prefstore._internal.sync import DurableSync, IdbfsSync, NoopSync
from prefstore.backends import (
    InMemoryPreferences,
    NativePreferenceBackend,
    PlatformPreferences,
    SQLitePreferences,
    StorageBackend,
    VirtualFileBackend,
)
from prefstore.config import (
    BackendFactory,
    NativeStoreConfigSchema,
    PreferencesConfig,
    create_store,
    is_browser_runtime,
)
from prefstore.exceptions import (
    BackendUnavailableError,
    InvalidKeyError,
    InvalidValueError,
    PreferenceConfigError,
    PreferenceError,
)
from prefstore.namespace import Namespace, sanitize_name
from prefstore.store import PreferenceStore

__all__ = [
    "BackendFactory",
    "BackendUnavailableError",
    "DurableSync",
    "IdbfsSync",
    "InMemoryPreferences",
    "InvalidKeyError",
    "InvalidValueError",
    "Namespace",
    "NativePreferenceBackend",
    "NativeStoreConfigSchema",
    "NoopSync",
    "PlatformPreferences",
    "PreferenceConfigError",
    "PreferenceError",
    "PreferenceStore",
    "PreferencesConfig",
    "SQLitePreferences",
    "StorageBackend",
    "VirtualFileBackend",
    "create_store",
    "is_browser_runtime",
]
