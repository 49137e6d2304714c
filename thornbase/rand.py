"""PCG random number generator with 32-bit state."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF
_MULTIPLIER = 747796405


def _f32(x: float) -> float:
    return struct.unpack("f", struct.pack("f", x))[0]


def _to_int32(x: int) -> int:
    x &= _MASK
    return x - (1 << 32) if x & 0x80000000 else x


class Rand:
    """A deterministic random number generator."""

    def __init__(self, state: int, seq: int) -> None:
        self.state = 0
        self.inc = ((seq << 1) | 1) & _MASK
        self._advance()
        self.state = (self.state + state) & _MASK
        self._advance()

    def _advance(self) -> None:
        self.state = (self.state * _MULTIPLIER + self.inc) & _MASK

    def next(self) -> int:
        """Return the next 32-bit random number."""
        x = self.state
        self._advance()
        x = (((x >> ((x >> 28) + 4)) ^ x) * 277803737) & _MASK
        return (x >> 22) ^ x

    def range_fast(self, lo: int, hi: int) -> int:
        """Return a number in [lo, hi]; some values may be slightly more likely."""
        if hi <= lo:
            return lo
        span = (hi - lo + 1) & _MASK
        off = (((self.next() >> 16) * span) >> 16) & _MASK
        return _to_int32(lo + off)

    def fnext(self) -> float:
        """Return a single-precision number in [0, 1)."""
        return _f32(float(self.next())) * (1.0 / 4294967296.0)

    def frange(self, lo: float, hi: float) -> float:
        """Return a single-precision number in [lo, hi)."""
        lo32 = _f32(lo)
        span = _f32(_f32(hi) - lo32)
        return _f32(lo32 + _f32(self.fnext() * span))