"""Durable-sync abstraction for persistent virtual filesystems."""

from __future__ import annotations

import logging
import sys
from typing import Any, Protocol

from prefstore.exceptions import BackendUnavailableError

logger = logging.getLogger(__name__)


class DurableSync(Protocol):
    """Flush the virtual filesystem to durable storage.  Inject a fake in tests."""

    def __call__(self) -> bool: ...


class NoopSync:
    """Sync for filesystems that are already durable (desktop, tests)."""

    def __call__(self) -> bool:
        return True


class IdbfsSync:
    """Push Emscripten's in-memory FS to IndexedDB via ``FS.syncfs``.

    The flush itself completes asynchronously inside the browser; calling
    this only issues it.  Failures reported by the browser are logged.
    """

    def __init__(self, fs: Any = None) -> None:
        if fs is None:
            fs = _emscripten_fs()
        self._fs = fs

    def __call__(self) -> bool:
        self._fs.syncfs(False, _on_synced)
        return True


def _on_synced(err: Any = None) -> None:
    if err:
        logger.warning("IDBFS sync failed: %s", err)


def _emscripten_fs() -> Any:
    if sys.platform != "emscripten":
        raise BackendUnavailableError("idbfs-sync", f"not running under Pyodide ({sys.platform})")
    import pyodide_js

    return pyodide_js.FS
