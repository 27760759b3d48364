"""Game configuration: field size, speed and rendering options."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ROWS = 3
DEFAULT_COLS = 3
DEFAULT_TICKS_PER_TURN = 20
DEFAULT_TICK_SPEED = 12


@dataclass(frozen=True)
class GameConfig:
    """Settings that shape a match.

    ``rows`` is the number of cells per column and ``cols`` the number of
    cells per row.  ``tick_speed`` is the timer prescaler exponent: one tick
    lasts ``2 ** tick_speed`` microseconds times 2000 compare counts at
    16 MHz, so it only influences how fast the turn timer runs.
    """

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    ticks_per_turn: int = DEFAULT_TICKS_PER_TURN
    tick_speed: int = DEFAULT_TICK_SPEED
    unicode: bool = True
    ascii_art: bool = True

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError("the field needs at least one row and one column")
        if self.ticks_per_turn < 1:
            raise ValueError("a turn must last at least one tick")
        if self.tick_speed < 0:
            raise ValueError("tick speed must not be negative")

    def diagonal_length(self) -> int:
        """Number of cells a diagonal needs to win."""
        return min(self.rows, self.cols)

    def max_line(self) -> int:
        """Length of the longest possible winning line."""
        return max(self.rows, self.cols)

    def cell_count(self) -> int:
        """Total number of cells on the field."""
        return self.rows * self.cols

    @property
    def tick_seconds(self) -> float:
        """Wall-clock length of one timer tick."""
        return (2 ** self.tick_speed) * 2000 / 16_000_000