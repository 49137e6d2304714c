"""Murmur3-based hash of 32-bit values."""

_MASK = 0xFFFFFFFF


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _update(state: int, data: int) -> int:
    k = (data * 0xCC9E2D51) & _MASK
    k = _rotl(k, 15)
    k = (k * 0x1B873593) & _MASK
    state ^= k
    state = _rotl(state, 13)
    return (state * 5 + 0xE6546B64) & _MASK


def _finalize(state: int, length: int) -> int:
    h = state ^ length
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK
    h ^= h >> 16
    return h


def hash32(x: int) -> int:
    """Hash a 32-bit value."""
    return _finalize(_update(0, x & _MASK), 4)