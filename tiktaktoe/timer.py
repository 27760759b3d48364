"""Turn timer: counts ticks and forces a move when a turn runs out."""

from __future__ import annotations

from collections.abc import Callable

from .board import GameState, Player


class GameTimer:
    """Counts ticks for the whole match and for the current turn.

    Each call to :meth:`tick` stands for one timer interrupt.  When the turn
    counter reaches its last tick, ``on_timeout`` is called so the game can
    make a move on the player's behalf.  A paused timer ignores ticks.
    """

    def __init__(
        self, ticks_per_turn: int, on_timeout: Callable[[], None] | None = None
    ) -> None:
        if ticks_per_turn < 1:
            raise ValueError("a turn must last at least one tick")
        self.ticks_per_turn = ticks_per_turn
        self.on_timeout = on_timeout
        self.is_running = True
        self.ticks_total = 0
        self.ticks_turn = 0

    def tick(self) -> None:
        """Advance both counters by one tick; fire the timeout on the last one."""
        if not self.is_running:
            return
        self.ticks_total += 1
        self.ticks_turn = (self.ticks_turn + 1) % self.ticks_per_turn
        if self.ticks_turn == self.ticks_per_turn - 1 and self.on_timeout is not None:
            self.on_timeout()

    def finish_turn(self, state: GameState) -> None:
        """Book the ticks of this turn to the current player and restart the turn."""
        if state.current_player is Player.CROSS:
            state.cross_total_ticks += self.ticks_turn
        else:
            state.circle_total_ticks += self.ticks_turn
        self.ticks_turn = 0

    def pause(self) -> None:
        self.is_running = False

    def resume(self) -> None:
        self.is_running = True

    def remaining(self) -> int:
        """Ticks left in the current turn."""
        return self.ticks_per_turn - self.ticks_turn

    def reset(self) -> None:
        """Clear both counters and start running."""
        self.ticks_total = 0
        self.ticks_turn = 0
        self.is_running = True