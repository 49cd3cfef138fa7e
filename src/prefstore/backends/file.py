"""VirtualFileBackend — one text file per key on a persistent virtual filesystem."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from prefstore import codec
from prefstore._internal.sync import DurableSync, NoopSync
from prefstore.backends.base import StorageBackend
from prefstore.exceptions import InvalidKeyError

if TYPE_CHECKING:
    from pathlib import Path

    from prefstore.namespace import Namespace

T = TypeVar("T")

_FORBIDDEN_IN_KEY = ("/", "\\", "\x00")


class VirtualFileBackend(StorageBackend):
    """File-per-key store rooted at a :class:`Namespace` directory.

    Values are written as their canonical text (see :mod:`prefstore.codec`)
    and every mutation is followed by a call to the injected *sync*.
    Filesystem errors propagate unchanged.

    Parameters:
        namespace: Directory that holds this application's entries.
        sync:      Durable flush invoked after each mutation.  Defaults to
                   :class:`NoopSync`.
    """

    name = "file"

    def __init__(self, namespace: Namespace, sync: DurableSync | None = None) -> None:
        self._namespace = namespace
        self._sync: DurableSync = sync or NoopSync()

    @property
    def namespace(self) -> Namespace:
        return self._namespace

    # ── StorageBackend protocol ──────────────────────────────

    def set_int(self, key: str, value: int) -> None:
        self._write(key, codec.encode_int(value))

    def get_int(self, key: str, default: int) -> int:
        return self._read(key, default, codec.decode_int)

    def set_float(self, key: str, value: float) -> None:
        self._write(key, codec.encode_float(value))

    def get_float(self, key: str, default: float) -> float:
        return self._read(key, default, codec.decode_float)

    def set_string(self, key: str, value: str) -> None:
        self._write(key, codec.encode_string(value))

    def get_string(self, key: str, default: str) -> str:
        return self._read(key, default, codec.decode_string)

    def has_key(self, key: str) -> bool:
        return self._path(key).is_file()

    def delete_key(self, key: str) -> None:
        path = self._path(key)
        if not path.is_file():
            return
        path.unlink()
        self._sync()

    def delete_all(self) -> None:
        directory = self._namespace.path
        if not directory.is_dir():
            return
        for entry in directory.iterdir():
            if entry.is_file():
                entry.unlink()
        self._sync()

    # ── internals ────────────────────────────────────────────

    def _path(self, key: str) -> Path:
        if key in ("", ".", ".."):
            raise InvalidKeyError(key, "not a file name")
        for char in _FORBIDDEN_IN_KEY:
            if char in key:
                raise InvalidKeyError(key, f"contains {char!r}")
        return self._namespace.file_path(key)

    def _read(self, key: str, default: T, decode: Callable[[str], T | None]) -> T:
        path = self._path(key)
        if not path.is_file():
            return default
        # Undecodable bytes become U+FFFD and a leading BOM is dropped.
        with path.open("r", encoding="utf-8-sig", errors="replace", newline="") as fh:
            text = fh.read()
        value = decode(text)
        return default if value is None else value

    def _write(self, key: str, text: str) -> None:
        path = self._path(key)
        self._namespace.path.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        self._sync()
