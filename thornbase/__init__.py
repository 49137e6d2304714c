"""Base library: text console and formatting, errors, tool helpers, hashing, random numbers, allocation and vector math."""

__version__ = "0.1.0"
__all__ = [
    "console",
    "errors",
    "quote",
    "tool",
    "hash",
    "rand",
    "fixup",
    "memory",
    "vector",
    "quat",
    "mat4",
]