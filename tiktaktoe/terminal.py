"""Writing text, numbers, styles and cursor moves to a terminal stream."""

from __future__ import annotations

import sys
from typing import TextIO

from .conversion import int_to_str
from .style import CLEAR_SCREEN, Style

LINE_SEPARATOR = "\n"

_COORD_DIGITS = 3
_UINT32_DIGITS = 10


def move_sequence(x: int, y: int) -> str:
    """Escape sequence moving the cursor to column ``x``, row ``y``."""
    for value in (x, y):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"cursor coordinate {value} out of range")
    return f"\x1b[{int_to_str(y, _COORD_DIGITS)};{int_to_str(x, _COORD_DIGITS)}H"


class Terminal:
    """An output stream with helpers for styled text and cursor control."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def write(self, text: str) -> None:
        if text:
            self.stream.write(text)
            self.stream.flush()

    def print_int(self, number: int) -> None:
        self.write(int_to_str(number, _UINT32_DIGITS))

    def println(self, text: str) -> None:
        self.write(text + LINE_SEPARATOR)

    def println_int(self, number: int) -> None:
        self.write(int_to_str(number, _UINT32_DIGITS) + LINE_SEPARATOR)

    def print_styled(self, text: str, style: Style) -> None:
        self.write(style.apply(text))

    def println_styled(self, text: str, style: Style) -> None:
        self.write(style.apply(text) + LINE_SEPARATOR)

    def print_style(self, style: Style) -> None:
        self.write(style.codes())

    def clear(self) -> None:
        self.write(CLEAR_SCREEN)

    def move_to(self, x: int, y: int) -> None:
        self.write(move_sequence(x, y))