"""Text codec for preference values stored one-per-file.

Encoding is canonical and locale independent.  Decoding returns ``None``
on malformed input so that callers can fall back to their default.
"""

from __future__ import annotations

import re

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT32_DIGITS = len(str(INT32_MAX))

_INT_TEXT = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)
_FLOAT_TEXT = re.compile(
    r"""
    \s*
    [+-]?
    (?:
        (?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
      | nan
      | inf(?:inity)?
    )
    \s*
    """,
    re.ASCII | re.IGNORECASE | re.VERBOSE,
)


# ── encode ───────────────────────────────────────────────────


def encode_int(value: int) -> str:
    return str(value)


def encode_float(value: float) -> str:
    # repr is the shortest string that round-trips and never uses the locale.
    return repr(float(value))


def encode_string(value: str) -> str:
    return value


# ── decode ───────────────────────────────────────────────────


def decode_int(text: str) -> int | None:
    """Parse a base-10 Int32, or return ``None``."""
    if not _INT_TEXT.fullmatch(text):
        return None
    stripped = text.strip()
    digits = stripped.lstrip("+-").lstrip("0")
    if len(digits) > INT32_DIGITS:
        return None
    value = int(digits or "0")
    if stripped.startswith("-"):
        value = -value
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def decode_float(text: str) -> float | None:
    """Parse a decimal or scientific float, or return ``None``."""
    if not _FLOAT_TEXT.fullmatch(text):
        return None
    return float(text)


def decode_string(text: str) -> str | None:
    return text


# ── value checks ─────────────────────────────────────────────


def is_int32(value: object) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and INT32_MIN <= value <= INT32_MAX
    )


def is_float(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
