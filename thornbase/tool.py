"""Helpers for command-line tools: errors, integer parsing, byte swapping."""

from __future__ import annotations

import os
import re
from typing import Any, Iterable

from thornbase.console import format_string

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1

_INT_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(0[0-7]*)|([1-9][0-9]*))"
)


class ToolError(Exception):
    """A fatal error in a tool."""


def die(fmt: str, *args: Any) -> None:
    """Raise a ToolError with a formatted message."""
    raise ToolError(format_string(fmt, *args))


def die_errno(err: int, fmt: str, *args: Any) -> None:
    """Raise a ToolError with a formatted message and the text of an errno."""
    raise ToolError(f"{format_string(fmt, *args)}: {os.strerror(err)}")


def xatoi(s: str) -> int:
    """Parse a 32-bit integer in decimal, octal or hex, raising on failure."""
    if not s:
        die("empty string is not a valid integer")
    match = _INT_RE.fullmatch(s)
    if match is None:
        die("invalid integer")
    sign, hex_digits, octal, decimal = match.groups()
    if hex_digits is not None:
        value = int(hex_digits, 16)
    elif octal is not None:
        value = int(octal, 8)
    else:
        value = int(decimal)
    if sign == "-":
        value = -value
    if not _INT_MIN <= value <= _INT_MAX:
        die("number out of range")
    return value


def swap16(x: int) -> int:
    """Swap the bytes of a 16-bit value."""
    x &= 0xFFFF
    return ((x & 0xFF) << 8) | (x >> 8)


def swap32(x: int) -> int:
    """Swap the bytes of a 32-bit value."""
    return int.from_bytes((x & 0xFFFFFFFF).to_bytes(4, "little"), "big")


def _to_int16(x: int) -> int:
    return x - 0x10000 if x & 0x8000 else x


def swap16arr(arr: Iterable[int]) -> list[int]:
    """Return the signed 16-bit values with their bytes swapped."""
    return [_to_int16(swap16(value)) for value in arr]


def pack32(hi: int, lo: int) -> int:
    """Pack two 16-bit values into a 32-bit value."""
    return ((hi & 0xFFFF) << 16) | (lo & 0xFFFF)