"""Conversion of relative asset offsets to addresses."""

from __future__ import annotations

from typing import Optional

from thornbase.errors import fatal_error


def pointer_fixup(value: int, base: int, size: int) -> Optional[int]:
    """Turn an offset into an address; zero means no pointer."""
    if value == 0:
        return None
    if value > size:
        fatal_error(
            "Bad pointer in asset\nPointer: %p\nBase: %p\nSize: %zu",
            value,
            base,
            size,
        )
    return value + base