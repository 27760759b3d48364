"""ANSI escape sequences and the text styles built from them."""

from __future__ import annotations

from dataclasses import dataclass

CLEAR_SCREEN = "\x1b[1;1H\x1b[2J"
DEFAULT = ""
RESET = "\x1b[0m"

FG_RED = "\x1b[31m"
FG_GREEN = "\x1b[32m"
FG_YELLOW = "\x1b[33m"
FG_BLUE = "\x1b[34m"
FG_MAGENTA = "\x1b[35m"

BG_GREEN = "\x1b[42m"
BG_YELLOW = "\x1b[43m"

BOLD = "\x1b[1m"
DIM = "\x1b[2m"
ITALIC = "\x1b[3m"
INVERSE = "\x1b[7m"
HIDDEN = "\x1b[8m"

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"

ERASE_LINE_FROM_CURSOR = "\x1b[0K"


@dataclass(frozen=True)
class Style:
    """A combination of foreground, background and font escape codes."""

    fg_color: str | None = None
    bg_color: str | None = None
    font_style: str | None = None

    def codes(self) -> str:
        """The escape codes that switch this style on."""
        return "".join(
            code
            for code in (self.fg_color, self.bg_color, self.font_style)
            if code is not None
        )

    def apply(self, text: str) -> str:
        """Wrap ``text`` in this style, resetting afterwards."""
        return f"{self.codes()}{text}{RESET}"


DEFAULT_BOLD = Style(font_style=BOLD)
DEFAULT_ITALIC = Style(font_style=ITALIC)
DEFAULT_DIM = Style(font_style=DIM)

BOLD_DIM = Style(fg_color=DIM, font_style=BOLD)
ITALIC_DIM = Style(fg_color=DIM, font_style=ITALIC)

DEFAULT_CIRCLE = Style(fg_color=FG_MAGENTA)
BOLD_CIRCLE = Style(fg_color=FG_MAGENTA, font_style=BOLD)

DEFAULT_CROSS = Style(fg_color=FG_GREEN)
BOLD_CROSS = Style(fg_color=FG_GREEN, font_style=BOLD)

HEADING_STYLE = Style(fg_color=FG_BLUE, font_style=BOLD)