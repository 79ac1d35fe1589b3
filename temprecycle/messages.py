"""Coloured, bracketed console messages."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO


class Color(IntEnum):
    """Console text attributes used by the tool, keyed by their console value."""

    GREY = 7
    GREEN = 10
    CYAN = 11
    RED = 12
    YELLOW = 14
    WHITE = 15

    @property
    def ansi(self) -> str:
        """The ANSI escape sequence that selects this colour."""
        return _ANSI[self]


_ANSI = {
    Color.GREY: "\x1b[37m",
    Color.GREEN: "\x1b[92m",
    Color.CYAN: "\x1b[96m",
    Color.RED: "\x1b[91m",
    Color.YELLOW: "\x1b[93m",
    Color.WHITE: "\x1b[97m",
}


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def set_color(color: int, stream: TextIO | None = None) -> None:
    """Switch the text colour of *stream*; unknown colours raise ValueError."""
    _target(stream).write(Color(color).ansi)


def show_box(message: str, color: int, stream: TextIO | None = None) -> None:
    """Write ``[ message ]`` on its own line in *color*, then reset to white."""
    out = _target(stream)
    set_color(color, out)
    out.write(f"\n[ {message} ]\n")
    set_color(Color.WHITE, out)


def show_error(message: str, stream: TextIO | None = None) -> None:
    """Show an error message in red."""
    show_box(message, Color.RED, stream)


def show_info(message: str, stream: TextIO | None = None) -> None:
    """Show an informational message in cyan."""
    show_box(message, Color.CYAN, stream)


def show_date(message: str, stream: TextIO | None = None) -> None:
    """Show a summary message in yellow."""
    show_box(message, Color.YELLOW, stream)