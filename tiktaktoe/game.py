"""A match: turns, key handling and the game loop."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from typing import Protocol

from .board import Board, Cell, GameState, Mode, Player, check_for_winner
from .config import GameConfig
from .menu import Screens
from .render import FieldRenderer
from .style import BOLD, HIDDEN, HIDE_CURSOR
from .terminal import Terminal
from .timer import GameTimer
from .ui import START_HINT, GameUI

MATCH_HINT = "\nPress any key to return to the match..."
FINAL_MODIFIER = "\x1b[0;2m"

_ESC = 0x1B
_BRACKET = ord("[")
_QUIT_KEYS = frozenset(b"qQ")
_MARK_KEYS = frozenset(b"\r ")
_PAUSE_KEYS = frozenset(b"pP")
_ARROWS = {
    ord("A"): (-1, 0),
    ord("B"): (1, 0),
    ord("C"): (0, 1),
    ord("D"): (0, -1),
}


class _Keys(Protocol):
    def poll(self, timeout: float | None = ...) -> int | None: ...

    def wait_key(self) -> int: ...


def _random_byte() -> int:
    return random.getrandbits(8)


class Game:
    """Runs matches on one terminal, driven by key presses and a turn timer.

    ``clock`` is the time source the turn timer is measured against; it may
    be replaced by any callable returning seconds.
    """

    def __init__(
        self,
        config: GameConfig,
        terminal: Terminal,
        keys: _Keys,
        renderer: FieldRenderer,
        ui: GameUI,
        screens: Screens,
        rng: Callable[[], int] | None = None,
    ) -> None:
        self.config = config
        self.terminal = terminal
        self.keys = keys
        self.renderer = renderer
        self.ui = ui
        self.screens = screens
        self.rng = rng if rng is not None else _random_byte
        self.clock: Callable[[], float] = time.monotonic

        self.state = GameState()
        self.board = Board(config.rows, config.cols)
        self.selected: Cell | None = None
        self.last_cross: Cell | None = None
        self.last_circle: Cell | None = None
        self.timer = GameTimer(config.ticks_per_turn, self.on_timeout)

        self._forced = False
        self._next_tick: float | None = None

    # -- setup ---------------------------------------------------------------

    def start(self, mode: Mode) -> None:
        """Prepare a fresh match and draw the field."""
        # Clearing the previous selection avoids a leftover highlight.
        if self.selected is not None:
            self.selected.marked_by = Player.NONE
            self.renderer.select(self.selected)

        buffer = getattr(self.keys, "buffer", None)
        if buffer is not None:
            buffer.reset()

        self.state = GameState(mode=mode, current_player=self._starting_player())
        self.board = Board(self.config.rows, self.config.cols)
        self.selected = self.board.cell(0, 0)
        self.last_cross = None
        self.last_circle = None
        self._forced = False

        self.terminal.write(HIDE_CURSOR)
        self.ui.print_starting_player(self.state.current_player, mode)
        self.screens.any_key_to_continue(START_HINT)

        self.terminal.clear()
        self.timer.reset()
        self._next_tick = None
        self._redraw_field()

    def _starting_player(self) -> Player:
        return Player(self.rng() % 2)

    # -- main loop -----------------------------------------------------------

    def run(self, mode: Mode) -> GameState:
        """Play one match to its end and show the result; return its state."""
        self.start(mode)
        state = self.state

        if state.mode is Mode.PVE and state.current_player is Player.CIRCLE:
            self.last_circle = self.board.mark_random(Player.CIRCLE, self.rng)
            state.current_player = Player.CROSS
            state.fields_marked += 1
            self.renderer.select(self.last_circle)
            self.renderer.select(self.board.cell(0, 0))
            self.ui.update_turn(state.round, state.current_player)

        winner_cells: list[Cell] = []
        while True:
            byte = self._next_byte()
            redraw = self.handle_byte(byte)

            state.winner, winner_cells = self.check_winner()

            if self.timer.is_running and self.selected is not None:
                self.renderer.select(self.selected)

            if (
                state.winner is not Player.NONE
                or byte in _QUIT_KEYS
                or state.fields_marked >= self.config.cell_count()
            ):
                self.timer.pause()
                break

            if redraw:
                self._redraw_field()

        self.renderer.redraw_all(self.board, FINAL_MODIFIER)
        for cell in winner_cells:
            self.renderer.redraw_cell(cell, BOLD)

        state.calculate_summary(self.timer.ticks_total)
        self.screens.show_game_over(state)
        return state

    def _next_byte(self) -> int:
        """Wait for a key while keeping the turn timer going.

        Returns ``0`` after a move was forced by the timer and ``q`` once the
        input has ended.
        """
        timeout = 0.0
        while True:
            byte = self.keys.poll(timeout)
            if byte is not None:
                return byte
            self._advance_clock()
            if self._forced:
                self._forced = False
                self._handle_forced_move()
                return 0
            if getattr(self.keys, "eof", False):
                return ord("q")
            self.ui.update_timer(
                self.timer.remaining(), self.config.ticks_per_turn, self.timer.is_running
            )
            timeout = self._wait_time()

    def _wait_time(self) -> float:
        if self._next_tick is None:
            return self.config.tick_seconds
        return max(0.0, self._next_tick - self.clock())

    def _advance_clock(self) -> None:
        if not self.timer.is_running:
            self._next_tick = None
            return
        now = self.clock()
        if self._next_tick is None:
            self._next_tick = now + self.config.tick_seconds
            return
        while now >= self._next_tick and not self._forced:
            self._next_tick += self.config.tick_seconds
            self.timer.tick()

    # -- turns ---------------------------------------------------------------

    def _mark_random(self, player: Player) -> Cell | None:
        if all(cell.marked_by is not Player.NONE for cell in self.board):
            return None
        return self.board.mark_random(player, self.rng)

    def on_timeout(self) -> None:
        """Move on the waiting player's behalf when the turn ran out."""
        self._forced = True
        state = self.state
        if state.mode is Mode.PVE:
            cross = self._mark_random(Player.CROSS)
            if cross is not None:
                self.last_cross = cross
            circle = self._mark_random(Player.CIRCLE)
            if circle is not None:
                self.last_circle = circle
            else:
                # end_turn counts two marks, only one was made
                state.fields_marked -= 1
        elif state.current_player is Player.CROSS:
            cell = self._mark_random(Player.CROSS)
            if cell is not None:
                self.last_cross = cell
        elif state.current_player is Player.CIRCLE:
            cell = self._mark_random(Player.CIRCLE)
            if cell is not None:
                self.last_circle = cell

        self.end_turn()

    def end_turn(self) -> None:
        """Book the turn's time and hand over to the next player."""
        state = self.state
        self.timer.finish_turn(state)
        if state.mode is Mode.PVE:
            state.round += 1
            state.fields_marked += 2
        elif state.current_player is Player.CROSS:
            state.current_player = Player.CIRCLE
            if self.last_circle is not None:
                self.selected = self.last_circle
            state.fields_marked += 1
        else:
            state.current_player = Player.CROSS
            if self.last_cross is not None:
                self.selected = self.last_cross
            state.round += 1
            state.fields_marked += 1

    def _handle_forced_move(self) -> None:
        for cell in (self.last_cross, self.last_circle):
            if cell is not None:
                self.renderer.select(cell)
        self.ui.update_turn(self.state.round, self.state.current_player)

        if self.state.mode is Mode.PVE:
            chosen = self.last_circle
        elif self.state.current_player is Player.CIRCLE:
            chosen = self.last_circle
        else:
            chosen = self.last_cross
        self.selected = chosen if chosen is not None else self.board.cell(0, 0)

    def check_winner(self) -> tuple[Player, list[Cell]]:
        """The winner so far and the cells of the winning line."""
        return check_for_winner(self.board, self.last_circle, self.last_cross)

    # -- keys ----------------------------------------------------------------

    def handle_byte(self, byte: int) -> bool:
        """React to one key byte; ``True`` if the whole field must be redrawn."""
        if byte == _ESC:
            if self.timer.is_running:
                self._handle_escape()
            return False
        if byte in _MARK_KEYS:
            self._set_mark()
            return False
        if byte == ord("?"):
            self._open_controls()
            return True
        if byte in _PAUSE_KEYS:
            return self._toggle_pause()
        if byte == ord("+"):
            self.renderer.increase_size()
            return True
        if byte == ord("-"):
            self.renderer.decrease_size()
            return True
        return False

    def _handle_escape(self) -> None:
        if self.keys.poll(0.0) != _BRACKET:
            return
        code = self.keys.poll(0.0)
        if code is None or code not in _ARROWS or self.selected is None:
            return
        d_row, d_col = _ARROWS[code]
        row, col = self.selected.row + d_row, self.selected.col + d_col
        if 0 <= row < self.board.rows and 0 <= col < self.board.cols:
            self.selected = self.board.cell(row, col)

    def _set_mark(self) -> None:
        selected = self.selected
        state = self.state
        if selected is None or selected.marked_by is not Player.NONE or not self.timer.is_running:
            return

        if state.mode is Mode.PVE:
            selected.marked_by = Player.CROSS
            self.last_cross = selected
            already_won = (
                state.fields_marked >= 4 and self.check_winner()[0] is not Player.NONE
            )
            if not already_won:
                if state.fields_marked + 1 < self.config.cell_count():
                    self.last_circle = self.board.mark_random(Player.CIRCLE, self.rng)
                else:
                    # end_turn counts two marks, only one was made
                    state.fields_marked -= 1
            if self.last_circle is not None:
                self.renderer.redraw_cell(self.last_circle)
        else:
            selected.marked_by = state.current_player
            if state.current_player is Player.CIRCLE:
                self.last_circle = selected
            else:
                self.last_cross = selected
            self.renderer.select(selected)

        self.end_turn()
        self.ui.update_turn(state.round, state.current_player)

    def _open_controls(self) -> None:
        if self.timer.is_running:
            self.timer.pause()
            self.screens.show_controls(MATCH_HINT)
            self.timer.resume()
            self._next_tick = None
        else:
            self.screens.show_controls(MATCH_HINT)

    def _toggle_pause(self) -> bool:
        if self.timer.is_running:
            self.timer.pause()
            self.renderer.redraw_all(self.board, HIDDEN)
            return False
        self.timer.resume()
        self._next_tick = None
        return True

    def _redraw_field(self) -> None:
        self.terminal.clear()
        self.ui.print_heading()
        self.ui.display_turn(self.state.round, self.state.current_player)
        self.ui.display_timer(
            self.timer.remaining(), self.config.ticks_per_turn, self.timer.is_running
        )
        self.renderer.redraw_field()
        self.renderer.redraw_all(self.board, "")
        if self.selected is not None:
            self.renderer.select(self.selected)