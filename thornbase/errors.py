"""Fatal error reporting."""

from __future__ import annotations

from typing import Any, Optional

from thornbase.console import Console, format_string


class FatalError(Exception):
    """An unrecoverable error; carries the message and the console it targets."""

    def __init__(self, message: str, console: Optional[Console] = None) -> None:
        super().__init__(message)
        self.message = message
        self.console = console

    def __str__(self) -> str:
        return self.message


def console_fatal(cs: Optional[Console], fmt: str, *args: Any) -> None:
    """Raise a fatal error with a formatted message, tied to the given console."""
    raise FatalError(format_string(fmt, *args), cs)


def fatal_error(fmt: str, *args: Any) -> None:
    """Raise a fatal error with a formatted message and no console."""
    console_fatal(None, fmt, *args)


def assert_fail(file: str, line: int, pred: str) -> None:
    """Report a failed assertion."""
    fatal_error("Assertion failed\n%s:%d\n%s", file, line, pred)


def fatal_dloverflow(file: str, line: int) -> None:
    """Report a display list overflow."""
    fatal_error("Display list overflow\n%s:%d", file, line)