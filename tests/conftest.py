"""Shared test fixtures."""

import pytest

from prefstore import (
    InMemoryPreferences,
    Namespace,
    NativePreferenceBackend,
    PreferenceStore,
    SQLitePreferences,
    VirtualFileBackend,
)


class RecordingSync:
    """DurableSync fake that counts flushes."""

    def __init__(self, result: bool = True) -> None:
        self.calls = 0
        self.result = result

    def __call__(self) -> bool:
        self.calls += 1
        return self.result


@pytest.fixture
def sync():
    return RecordingSync()


@pytest.fixture
def failing_sync():
    return RecordingSync(result=False)


@pytest.fixture
def namespace(tmp_path):
    return Namespace.from_identity("My Co!", "Game/2", mount_point=tmp_path / "idbfs")


@pytest.fixture
def file_backend(namespace, sync):
    return VirtualFileBackend(namespace, sync=sync)


@pytest.fixture(params=["file", "memory", "sqlite"])
def store(request, namespace, sync, tmp_path):
    """A PreferenceStore over each backend variant."""
    if request.param == "file":
        backend = VirtualFileBackend(namespace, sync=sync)
    elif request.param == "memory":
        backend = NativePreferenceBackend(InMemoryPreferences())
    else:
        backend = NativePreferenceBackend(SQLitePreferences(tmp_path / "prefs.db"))
    return PreferenceStore(backend)


@pytest.fixture
def file_store(file_backend):
    return PreferenceStore(file_backend)
