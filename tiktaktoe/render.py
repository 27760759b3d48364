"""Drawing the field frame and the marks inside its cells."""

from __future__ import annotations

from enum import IntEnum

from .art import FIELD_X_OFFSET, Artwork, Glyphs, artwork
from .art import glyphs as _glyphs_for
from .board import Board, Cell, Player
from .config import GameConfig
from .style import DEFAULT_CIRCLE, DEFAULT_CROSS, INVERSE, RESET
from .terminal import Terminal, move_sequence


class Size(IntEnum):
    """Cell sizes, each with a fixed width and height including one divider."""

    SMALL = 0
    MEDIUM = 1
    LARGE = 2

    @property
    def width(self) -> int:
        return _DIMENSIONS[self][0]

    @property
    def height(self) -> int:
        return _DIMENSIONS[self][1]


_DIMENSIONS = {
    Size.SMALL: (4, 3),
    Size.MEDIUM: (8, 5),
    Size.LARGE: (10, 7),
}

Pattern = tuple[tuple[str, ...], ...]


def cell_pattern(size: Size, player: Player, glyphs: Glyphs) -> Pattern:
    """The characters filling a cell of ``size`` marked by ``player``."""
    if player is Player.NONE:
        return tuple((" ",) * (size.width - 1) for _ in range(size.height - 2))

    bw, fw, mid = glyphs.diagonal_bw, glyphs.diagonal_fw, glyphs.diagonal_mid
    tl, tr = glyphs.corner_top_left, glyphs.corner_top_right
    bl, br = glyphs.corner_bot_left, glyphs.corner_bot_right
    side, tb, _ = glyphs.side, glyphs.top_bottom, " "
    cross = player is Player.CROSS

    if size is Size.SMALL:
        return ((_, "X" if cross else "O", _),)
    if size is Size.MEDIUM:
        if cross:
            return (
                (_, _, bw, _, fw, _, _),
                (_, _, _, mid, _, _, _),
                (_, _, fw, _, bw, _, _),
            )
        return (
            (_, tl, tb, tb, tb, tr, _),
            (_, side, _, _, _, side, _),
            (_, bl, tb, tb, tb, br, _),
        )
    if cross:
        return (
            (_, _, bw, _, _, _, fw, _, _),
            (_, _, _, bw, _, fw, _, _, _),
            (_, _, _, _, mid, _, _, _, _),
            (_, _, _, fw, _, bw, _, _, _),
            (_, _, fw, _, _, _, bw, _, _),
        )
    middle = (_, side, _, _, _, _, _, side, _)
    return (
        (_, tl, tb, tb, tb, tb, tb, tr, _),
        middle,
        middle,
        middle,
        (_, bl, tb, tb, tb, tb, tb, br, _),
    )


_MARK_CODES = {
    Player.CROSS: DEFAULT_CROSS.codes(),
    Player.CIRCLE: DEFAULT_CIRCLE.codes(),
    Player.NONE: "",
}


class FieldRenderer:
    """Draws the field and its cells at the current cell size."""

    def __init__(
        self,
        terminal: Terminal,
        config: GameConfig,
        art: Artwork | None = None,
        glyphs: Glyphs | None = None,
    ) -> None:
        self.terminal = terminal
        self.config = config
        self.art = art if art is not None else artwork(config.ascii_art, config.unicode)
        self.glyphs = glyphs if glyphs is not None else _glyphs_for(config.unicode)
        self.size = Size.MEDIUM
        self._previous: tuple[int, int, Player] | None = None

    def increase_size(self) -> None:
        """Switch to the next larger cell size, if there is one."""
        if self.size < Size.LARGE:
            self.size = Size(self.size + 1)

    def decrease_size(self) -> None:
        """Switch to the next smaller cell size, if there is one."""
        if self.size > Size.SMALL:
            self.size = Size(self.size - 1)

    def field_height(self) -> int:
        """Rows of screen the field takes up at the current size."""
        return self.config.rows * self.size.height

    def _draw(self, row: int, col: int, marked_by: Player, modifier: str | None) -> None:
        modifier = modifier or ""
        width, height = self.size.width, self.size.height
        top = row * (height - 1) + 1
        left = col * width + 1
        right = left + (width - 2)
        mark_codes = _MARK_CODES[marked_by]
        y_offset = self.art.field_y_offset

        for offset, line in enumerate(cell_pattern(self.size, marked_by, self.glyphs)):
            y = top + offset + y_offset
            body = "".join(f"{mark_codes}{modifier}{char}" for char in line)
            self.terminal.write(
                move_sequence(left + FIELD_X_OFFSET, y)
                + modifier
                + body
                + move_sequence(right + FIELD_X_OFFSET, y)
                + RESET
            )

    def redraw_cell(self, cell: Cell, modifier: str | None = "") -> None:
        """Draw one cell, with ``modifier`` codes applied to its contents."""
        self._draw(cell.row, cell.col, cell.marked_by, modifier)

    def select(self, cell: Cell) -> None:
        """Highlight ``cell`` and restore the previously highlighted one."""
        if self._previous is not None:
            self._draw(*self._previous, "")
        self._draw(cell.row, cell.col, cell.marked_by, INVERSE)
        self._previous = (cell.row, cell.col, cell.marked_by)

    def redraw_all(self, board: Board, modifier: str | None = "") -> None:
        """Draw every cell of ``board``."""
        for cell in board:
            self._draw(cell.row, cell.col, cell.marked_by, modifier)

    def redraw_field(self) -> None:
        """Draw the frame with its dividers."""
        g = self.glyphs
        width = self.size.width
        length = self.config.cols * width + 1

        def line(first: str, inner: str, joint: str, last: str) -> str:
            middle = "".join(
                joint if i % width == 0 else inner for i in range(1, length - 1)
            )
            return f"{first}{middle}{last}\n"

        top = line(g.corner_top_left, g.top_bottom, g.t_top, g.corner_top_right)
        divider = line(g.t_left, g.top_bottom, g.cross, g.t_right)
        plain = line(g.side, g.empty, g.side, g.side)
        bottom = line(g.corner_bot_left, g.top_bottom, g.t_bot, g.corner_bot_right)

        rows = divider.join([plain * (self.size.height - 2)] * self.config.rows)
        self.terminal.write(
            move_sequence(FIELD_X_OFFSET, self.art.field_y_offset) + top + rows + bottom
        )