# thornbase

A small base library for game code, in plain Python with no dependencies.

## What it provides

- `thornbase.console` is a fixed-size text console. It has the classes `Console` and `ConsoleType`.
  - A `TRUNCATE` console stops taking text once its rows are full. A `SCROLL` console wraps around and overwrites its oldest row.
  - Lines longer than the column count continue on the next row.
  - `Console.printf` and `format_string` implement a printf-style formatter. It supports the flags `-+ #0`, field width and precision, and the length modifiers `hh h l ll j z t L`. The conversions are `d i o u x X c p s f F e E g G`. Every float conversion is written in fixed-point form. A conversion that cannot be parsed is written as `%ERR`.
  - `Console.rows()` returns the visible rows as `bytes`, oldest first.
  - `cprintf` writes to the shared `main_console`.
- `thornbase.errors` defines `FatalError`. The helpers `fatal_error`, `assert_fail`, `fatal_dloverflow` and `console_fatal` each raise it with a formatted message. `console_fatal` also attaches the console it was given.
- `thornbase.quote` provides `quote_mem` and `quote_str`. They turn bytes or text into a short, escaped, double-quoted string for diagnostics. Long input is cut off and marked with `...`.
- `thornbase.tool` holds helpers for command-line tools:
  - `xatoi` parses a 32-bit integer in decimal, octal or `0x` hex form.
  - `swap16`, `swap32` and `swap16arr` swap bytes, and `pack32` packs two 16-bit values into one 32-bit value.
  - `die` and `die_errno` raise `ToolError`.
- `thornbase.hash` provides `hash32`, a 32-bit Murmur3-based integer hash.
- `thornbase.rand` provides `Rand`, a deterministic PCG random number generator. Its methods are `next`, `range_fast`, `fnext` and `frange`.
- `thornbase.fixup` provides `pointer_fixup`. It turns a bounds-checked relative offset into an absolute address. An offset of zero gives `None`.
- `thornbase.memory` provides the bump allocators `MemZone` and `Heap`. They work on integer address ranges and hand out 16-byte aligned addresses. `Heap` uses the zone with the least room that still fits the request. Running out of space raises `FatalError`.
- `thornbase.vector`, `thornbase.quat` and `thornbase.mat4` provide the math types:
  - the vector types `Vec2`, `Vec3` and `IVec3`, and the scalar helpers `fclamp` and `fmix`;
  - quaternions: `Quat`, plus `identity`, `axis_angle`, `from_angles`, `rotate_x`, `rotate_y` and `rotate_z`;
  - 4×4 column-major matrices: `Mat4`, built by `translate_rotate_scale` and `perspective`.

## What it does not do

The console is only a text buffer. Nothing in this package draws it to a screen or framebuffer, and there is no crash screen. Fatal errors are ordinary Python exceptions. The package has no command-line entry points.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from thornbase.console import Console, ConsoleType, format_string
from thornbase.rand import Rand
from thornbase.hash import hash32

cs = Console(ConsoleType.TRUNCATE)
cs.printf("i = %06d, s = %-6s|\n", -123, "abc")
for row in cs.rows():
    print(row)                          # b'i = -00123, s = abc   |'

print(format_string("x = %#06x", 1))    # x = 0x0001

rng = Rand(1, 2)
print(rng.range_fast(1, 6))
print(hash32(42))
```