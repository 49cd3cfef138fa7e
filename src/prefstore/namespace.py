"""Namespace — the directory every preference file of one application lives in."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MOUNT_POINT = "/idbfs"

_UNSAFE_CHARS = re.compile(r"[^0-9a-zA-Z_.-]+")


def sanitize_name(name: str) -> str:
    """Strip every character outside ``[0-9a-zA-Z_.-]`` from *name*.

    Total and idempotent; may return an empty string.
    """
    return _UNSAFE_CHARS.sub("", name)


@dataclass(frozen=True)
class Namespace:
    """On-disk namespace derived from an application identity.

    Attributes:
        mount_point:  Root of the persistent filesystem (``/idbfs`` in a browser).
        organization: Sanitized organization name.
        application:  Sanitized application name.
    """

    mount_point: Path
    organization: str
    application: str

    @classmethod
    def from_identity(
        cls,
        organization: str,
        application: str,
        mount_point: str | Path = DEFAULT_MOUNT_POINT,
    ) -> Namespace:
        """Build a namespace from raw identity strings, sanitizing both."""
        return cls(
            mount_point=Path(mount_point),
            organization=sanitize_name(organization),
            application=sanitize_name(application),
        )

    @property
    def path(self) -> Path:
        # Empty segments collapse, same as "/idbfs//app/" on a POSIX path.
        return self.mount_point / self.organization / self.application

    def file_path(self, key: str) -> Path:
        return self.path / key

    def __str__(self) -> str:
        return str(self.path)
