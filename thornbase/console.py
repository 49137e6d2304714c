"""Fixed-size text console buffer with a small printf-style formatter."""

from __future__ import annotations

import enum
import math
import operator
import re
from typing import Any, Iterator, Optional, Union

DEFAULT_COLS = 48
DEFAULT_ROWS = 17

_BAD_FORMAT = "%ERR"
_DECIMAL_DIGITS = 27
_MAX_FLOAT_PRECISION = 22
_OCTAL_ALT_PRECISION = 23
_FLOAT_CONVERSIONS = frozenset("eEfFgG")

_FLAGS_RE = re.compile(r"[-+ #0]*")
_DIGITS_RE = re.compile(r"[0-9]+")
_LENGTH_RE = re.compile(r"(?:hh|h|ll|l|j|z|t|L)?")

# Bit width of the integer argument for each length modifier. "L" reads no
# argument at all and yields zero.
_LENGTH_BITS: dict[str, Optional[int]] = {
    "": 32,
    "hh": 8,
    "h": 16,
    "l": 64,
    "ll": 64,
    "j": 64,
    "z": 64,
    "t": 64,
    "L": None,
}


class ConsoleType(enum.Enum):
    """What happens when the console runs out of rows."""

    TRUNCATE = "truncate"
    SCROLL = "scroll"


def _take(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _read_int(args: Iterator[Any], bits: Optional[int], signed: bool) -> int:
    if bits is None:
        return 0
    value = operator.index(_take(args)) & ((1 << bits) - 1)
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _char_code(value: Any) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a character argument must be a single character")
        return ord(value) & 0xFF
    return operator.index(value) & 0xFF


def _positive_prefix(flags: set[str]) -> str:
    if "+" in flags:
        return "+"
    if " " in flags:
        return " "
    return ""


def _float_body(x: float, precision: int) -> str:
    clamped = min(max(precision, 0), _MAX_FLOAT_PRECISION)
    scaled = x * float(10**clamped)
    whole = int(scaled) if math.isfinite(scaled) else int(x) * 10**clamped
    digits = str(whole).rjust(_DECIMAL_DIGITS, "0")
    point = len(digits) - clamped
    text = f"{digits[:point]}.{digits[point:]}"
    keep = len(digits) - precision - 1
    if keep > 0:
        text = text[:keep].lstrip("0") + text[keep:]
    return text


def _convert(
    conv: str,
    length: str,
    flags: set[str],
    has_precision: bool,
    precision: int,
    args: Iterator[Any],
) -> Optional[tuple[str, str, bool, int]]:
    """Return (prefix, body, is_integer, precision), or None if unknown."""
    bits = _LENGTH_BITS[length]
    if conv in ("d", "i"):
        value = _read_int(args, bits, signed=True)
        prefix = "-" if value < 0 else _positive_prefix(flags)
        magnitude = abs(value)
        return prefix, str(magnitude) if magnitude else "", True, precision
    if conv == "o":
        value = _read_int(args, bits, signed=False)
        if "#" in flags:
            precision = max(precision, _OCTAL_ALT_PRECISION)
        return "", format(value, "o") if value else "", True, precision
    if conv == "u":
        value = _read_int(args, bits, signed=False)
        return "", str(value) if value else "", True, precision
    if conv in ("x", "X"):
        value = _read_int(args, bits, signed=False)
        prefix = "0" + conv if value and "#" in flags else ""
        return prefix, format(value, conv) if value else "", True, precision
    if conv == "c":
        return "", chr(_char_code(_take(args))), False, precision
    if conv == "p":
        value = _take(args)
        address = 0 if value is None else operator.index(value) & 0xFFFFFFFF
        return "", f"${address:08x}", False, precision
    if conv == "s":
        value = _take(args)
        if value is None:
            text = "(null)"
        elif isinstance(value, (bytes, bytearray)):
            text = bytes(value).decode("latin-1")
        else:
            text = str(value)
        if has_precision:
            text = text[:precision]
        return "", text, False, precision
    if conv in _FLOAT_CONVERSIONS:
        uppercase = conv.isupper()
        x = float(_take(args))
        prefix = ""
        if math.copysign(1.0, x) < 0:
            x = -x
            prefix = "-"
        else:
            prefix = _positive_prefix(flags)
        if not has_precision:
            precision = 6
        if math.isinf(x):
            body = "INF" if uppercase else "inf"
        elif math.isnan(x):
            body = "NAN" if uppercase else "nan"
            prefix = ""
        else:
            body = _float_body(x, precision)
        return prefix, body, False, precision
    return None


def _format_item(fmt: str, pos: int, args: Iterator[Any]) -> tuple[str, int]:
    """Format one conversion starting just after '%'; return text and next index."""
    if fmt.startswith("%", pos):
        return "%", pos + 1
    start = pos

    match = _FLAGS_RE.match(fmt, pos)
    flags = set(match.group())
    pos = match.end()
    left = "-" in flags

    width = 0
    if fmt.startswith("*", pos):
        # The '*' itself is left in place, so the conversion that follows
        # always fails to parse.
        width = _read_int(args, 32, signed=True)
        if width < 0:
            width = -width
            left = True
    else:
        match = _DIGITS_RE.match(fmt, pos)
        if match:
            width = int(match.group())
            pos = match.end()

    has_precision = False
    precision = 0
    if fmt.startswith(".", pos):
        has_precision = True
        pos += 1
        if fmt.startswith("*", pos):
            precision = _read_int(args, 32, signed=True)
            has_precision = precision >= 0
            pos += 1
        else:
            match = _DIGITS_RE.match(fmt, pos)
            if match is None:
                return _BAD_FORMAT, start
            precision = int(match.group())
            pos = match.end()

    match = _LENGTH_RE.match(fmt, pos)
    length = match.group()
    pos = match.end()

    conv = fmt[pos : pos + 1]
    converted = _convert(conv, length, flags, has_precision, precision, args)
    if converted is None:
        return _BAD_FORMAT, start
    prefix, body, is_int, precision = converted

    zeros = 0
    if is_int:
        if "0" in flags and not has_precision:
            zeros = width - len(body) - len(prefix)
        if not has_precision and precision == 0:
            precision = 1
        zeros = max(zeros, precision - len(body), 0)
    pad = width - len(body) - len(prefix) - zeros
    text = prefix + "0" * zeros + body
    return (text + " " * pad if left else " " * pad + text), pos + 1


def format_string(fmt: str, *args: Any) -> str:
    """Format arguments the way the console's printf does."""
    arg_iter = iter(args)
    pieces = []
    pos = 0
    while True:
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        text, pos = _format_item(fmt, percent + 1, arg_iter)
        pieces.append(text)
    return "".join(pieces)


def _encode(text: str) -> bytes:
    return b"".join(
        bytes((code,)) if (code := ord(ch)) < 256 else ch.encode("utf-8")
        for ch in text
    )


class Console:
    """A fixed grid of character rows, filled by writing text."""

    def __init__(
        self,
        ctype: ConsoleType = ConsoleType.TRUNCATE,
        cols: int = DEFAULT_COLS,
        rows: int = DEFAULT_ROWS,
    ) -> None:
        if cols < 1 or rows < 1:
            raise ValueError("console needs at least one row and one column")
        self.cols = cols
        self.num_rows = rows
        self._chars = bytearray(cols * rows)
        self._spans = [(0, 0)] * rows
        self.reset(ctype)

    def reset(self, ctype: Optional[ConsoleType] = None) -> None:
        """Empty the console, optionally changing its type."""
        if ctype is not None:
            self.ctype = ConsoleType(ctype)
        self._ptr = 0
        self._rowstart = 0
        self._rowend = self.cols
        self._row = 0

    def _next_row(self) -> None:
        self._spans[self._row] = (self._rowstart, self._ptr)
        self._row += 1
        if self.ctype is ConsoleType.TRUNCATE:
            self._rowstart = self._ptr
            if self._row < self.num_rows:
                self._rowend = self._ptr + self.cols
            else:
                self._rowend = self._ptr
        else:
            if self._row < self.num_rows:
                self._rowstart += self.cols
                self._rowend += self.cols
            else:
                self._rowstart = 0
                self._rowend = self.cols
                self._row = 0
            self._ptr = self._rowstart

    def _put_code(self, code: int) -> None:
        if code == 10:
            if self._row < self.num_rows:
                self._next_row()
            return
        if self._ptr >= self._rowend:
            if self._row >= self.num_rows:
                return
            self._next_row()
            if self._ptr >= self._rowend:
                return
        self._chars[self._ptr] = code & 0xFF
        self._ptr += 1

    def newline(self) -> None:
        """Start a new line unless already at the start of one."""
        if self._rowstart != self._ptr:
            self._next_row()

    def putc(self, c: Union[int, str]) -> None:
        """Write one character, given as a code or a one-character string."""
        if isinstance(c, str):
            if len(c) != 1:
                raise ValueError("putc takes a single character")
            for code in _encode(c):
                self._put_code(code)
        else:
            self._put_code(operator.index(c))

    def puts(self, s: Union[str, bytes, bytearray]) -> None:
        """Write a string."""
        data = bytes(s) if isinstance(s, (bytes, bytearray)) else _encode(s)
        for code in data:
            self._put_code(code)

    def printf(self, fmt: str, *args: Any) -> None:
        """Write formatted text."""
        self.puts(format_string(fmt, *args))

    def rows(self) -> list[bytes]:
        """Return the visible rows, oldest first."""
        count = self._row
        if self._ptr != self._rowstart:
            self._spans[count] = (self._rowstart, self._ptr)
            count += 1
        spans = self._spans
        if self.ctype is ConsoleType.TRUNCATE:
            ordered = spans[:count]
        else:
            ordered = spans[count:] + spans[:count]
        return [bytes(self._chars[start:end]) for start, end in ordered]


main_console = Console()


def cprintf(fmt: str, *args: Any) -> None:
    """Write formatted text to the main console."""
    main_console.printf(fmt, *args)