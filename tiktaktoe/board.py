"""The playing field, its cells, the match state and the rules for winning."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum, IntEnum
from itertools import chain

FIRST_ROUND = 1


class Player(IntEnum):
    """Who a cell is marked by."""

    CIRCLE = 0
    CROSS = 1
    NONE = 2


class Mode(Enum):
    """Player versus computer or player versus player."""

    PVE = "pve"
    PVP = "pvp"


@dataclass(eq=False)
class Cell:
    """One cell on the field with its coordinates and owner."""

    row: int
    col: int
    marked_by: Player = Player.NONE


def _average(total: int, rounds: int) -> int:
    return total // rounds if rounds > 0 else 0


@dataclass
class GameState:
    """Progress of a running match and the numbers for its summary."""

    mode: Mode = Mode.PVP
    current_player: Player = Player.CROSS
    winner: Player = Player.NONE
    round: int = FIRST_ROUND
    fields_marked: int = 0

    total_ticks: int = 0
    average_ticks: int = 0

    cross_total_ticks: int = 0
    cross_average_ticks: int = 0

    circle_total_ticks: int = 0
    circle_average_ticks: int = 0

    def calculate_summary(self, total_ticks: int) -> None:
        """Fill in the totals and per-turn averages at the end of a match."""
        self.total_ticks = total_ticks
        turns = self.round * 2 if self.mode is Mode.PVE else self.round
        self.average_ticks = _average(total_ticks, turns)

        # the loser made one turn less
        cross_rounds = self.round
        circle_rounds = self.round
        if self.winner is Player.CROSS:
            circle_rounds -= 1
        elif self.winner is Player.CIRCLE:
            cross_rounds -= 1

        self.cross_average_ticks = _average(self.cross_total_ticks, cross_rounds)
        self.circle_average_ticks = _average(self.circle_total_ticks, circle_rounds)


def _random_byte() -> int:
    return random.getrandbits(8)


class Board:
    """A grid of ``rows`` by ``cols`` cells."""

    def __init__(self, rows: int = 3, cols: int = 3) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("the field needs at least one row and one column")
        self.rows = rows
        self.cols = cols
        self._cells = [[Cell(row, col) for col in range(cols)] for row in range(rows)]

    def cell(self, row: int, col: int) -> Cell:
        """The cell at ``row``, ``col``; ``IndexError`` outside the field."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) is outside the field")
        return self._cells[row][col]

    def __iter__(self) -> Iterator[Cell]:
        return chain.from_iterable(self._cells)

    def __len__(self) -> int:
        return self.rows * self.cols

    def mark_random(
        self, player: Player, rng: Callable[[], int] = _random_byte
    ) -> Cell:
        """Mark a random free cell for ``player`` and return it.

        ``rng`` yields random non-negative integers; the column is drawn
        first, then the row.  Raises ``ValueError`` if no cell is free.
        """
        if all(cell.marked_by is not Player.NONE for cell in self):
            raise ValueError("no free cell left")
        while True:
            col = rng() % self.cols
            row = rng() % self.rows
            cell = self._cells[row][col]
            if cell.marked_by is Player.NONE:
                cell.marked_by = player
                return cell


def _walk(
    board: Board, row: int, col: int, d_row: int, d_col: int, player: Player
) -> Iterator[Cell]:
    row, col = row + d_row, col + d_col
    while 0 <= row < board.rows and 0 <= col < board.cols:
        cell = board.cell(row, col)
        if cell.marked_by is not player:
            return
        yield cell
        row, col = row + d_row, col + d_col


def find_winning_line(
    board: Board, cell: Cell | None, player: Player
) -> list[Cell] | None:
    """The line through ``cell`` that wins for ``player``, or ``None``.

    A full column or a full row wins, as does a diagonal run through ``cell``
    as long as the shorter side of the field.  ``cell`` is taken to be the
    player's latest mark.
    """
    if cell is None:
        return None
    row, col = cell.row, cell.col

    column = [board.cell(r, col) for r in range(board.rows)]
    if all(c.marked_by is player for c in column):
        return column

    line = [board.cell(row, c) for c in range(board.cols)]
    if all(c.marked_by is player for c in line):
        return line

    needed = min(board.rows, board.cols)
    for d_row, d_col in ((-1, 1), (-1, -1)):
        upper = list(_walk(board, row, col, d_row, d_col, player))
        lower = list(_walk(board, row, col, -d_row, -d_col, player))
        if len(upper) + 1 + len(lower) >= needed:
            return [*reversed(upper), board.cell(row, col), *lower]
    return None


def check_for_winner(
    board: Board, last_circle: Cell | None, last_cross: Cell | None
) -> tuple[Player, list[Cell]]:
    """The winner and the winning cells; circle is checked first."""
    line = find_winning_line(board, last_circle, Player.CIRCLE)
    if line is not None:
        return Player.CIRCLE, line
    line = find_winning_line(board, last_cross, Player.CROSS)
    if line is not None:
        return Player.CROSS, line
    return Player.NONE, []