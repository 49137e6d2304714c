"""Bump allocation from memory zones and a heap of several zones."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from thornbase.errors import fatal_error

_ALIGN = 16


def _align_up(x: int) -> int:
    return (x + _ALIGN - 1) & ~(_ALIGN - 1)


def _align_down(x: int) -> int:
    return x & ~(_ALIGN - 1)


@dataclass
class MemZone:
    """A contiguous address range that memory is handed out from."""

    start: int
    end: int
    name: str = ""
    pos: Optional[int] = None

    def __post_init__(self) -> None:
        if self.pos is None:
            self.pos = self.start

    def alloc(self, size: int) -> Optional[int]:
        """Allocate size bytes, 16-byte aligned; returns the address."""
        if size == 0:
            return None
        size = _align_up(size)
        if self.end - self.pos < size:
            fatal_error(
                "mem_zone_alloc failed\n"
                "Alloc size: %zu\n"
                "Zone: %s\n"
                "Zone size: %zu\n"
                "Total space required: %zu\n",
                size,
                self.name,
                self.end - self.start,
                self.pos + size - self.start,
            )
        address = self.pos
        self.pos = address + size
        return address


class Heap:
    """Allocates from several zones, preferring the one with least room."""

    def __init__(self, zones: Iterable[MemZone]) -> None:
        self.zones = list(zones)
        for zone in self.zones:
            zone.start = zone.pos = _align_up(zone.start)
            zone.end = _align_down(zone.end)
            if zone.start > zone.end:
                fatal_error("Bad memory layout")

    def alloc(self, size: int) -> Optional[int]:
        """Allocate size bytes, 16-byte aligned; returns the address."""
        if size == 0:
            return None
        asize = _align_up(size)
        best: Optional[MemZone] = None
        best_avail = None
        for zone in self.zones:
            avail = zone.end - zone.pos
            if asize <= avail and (best_avail is None or avail < best_avail):
                best, best_avail = zone, avail
        if best is None:
            fatal_error("Out of memory\nSize: %zu", size)
        address = best.pos
        best.pos += asize
        return address