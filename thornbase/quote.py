"""Quoting of byte strings for test logs."""

from __future__ import annotations

from typing import Union

_BUFFER_SIZE = 1024
_HEX = "0123456789abcdef"
_ESCAPES = {0x0A: "\\n", 0x0D: "\\r", 0x09: "\\t"}


def _quote_byte(c: int) -> str:
    if 32 <= c <= 126:
        ch = chr(c)
        return "\\" + ch if ch in "\"\\" else ch
    return _ESCAPES.get(c, "\\x" + _HEX[c >> 4] + _HEX[c & 15])


def quote_mem(mem: Union[bytes, bytearray, memoryview]) -> str:
    """Quote a byte string, truncating with "..." if it is too long."""
    data = bytes(mem)
    pieces = ['"']
    length = 1
    truncated = False
    for c in data:
        if _BUFFER_SIZE - length < 5:
            truncated = True
            break
        piece = _quote_byte(c)
        pieces.append(piece)
        length += len(piece)
    pieces.append('"')
    if truncated:
        pieces.append("...")
    return "".join(pieces)


def quote_str(s: str) -> str:
    """Quote a string up to its first NUL character."""
    return quote_mem(s.split("\0", 1)[0].encode("utf-8"))