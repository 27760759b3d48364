import io
import itertools
from collections import deque

import pytest

from tiktaktoe.board import FIRST_ROUND, Mode, Player
from tiktaktoe.config import GameConfig
from tiktaktoe.game import Game
from tiktaktoe.menu import Screens
from tiktaktoe.render import FieldRenderer, Size
from tiktaktoe.terminal import Terminal
from tiktaktoe.ui import GameUI


class FakeKeys:
    """Key presses arriving in batches; a waiting read delivers the next batch."""

    def __init__(self, *batches):
        self._pending = deque(b.encode("latin-1") if isinstance(b, str) else b for b in batches)
        self._current = deque()

    def _advance(self):
        if not self._current and self._pending:
            self._current.extend(self._pending.popleft())

    @property
    def eof(self):
        return not self._current and not self._pending

    def arrive(self, data):
        self._current.extend(data)

    def poll(self, timeout=0.0):
        if timeout != 0:
            self._advance()
        return self._current.popleft() if self._current else None

    def wait_key(self):
        self._advance()
        if not self._current:
            raise EOFError
        return self._current.popleft()


def make_game(*batches, rng=None):
    config = GameConfig(ascii_art=False, unicode=False)
    out = io.StringIO()
    terminal = Terminal(out)
    keys = FakeKeys(*batches)
    renderer = FieldRenderer(terminal, config)
    ui = GameUI(terminal, renderer)
    screens = Screens(terminal, ui, renderer, keys)
    game = Game(config, terminal, keys, renderer, ui, screens, rng or (lambda: 1))
    game.clock = lambda: 0.0
    return game, keys, out


def count(board, player):
    return sum(1 for cell in board if cell.marked_by is player)


def marked(board):
    return sum(1 for cell in board if cell.marked_by is not Player.NONE)


def test_pvp_cross_wins_top_row():
    game, _, out = make_game(
        "s", " ", "\x1b[B", " ", "\x1b[C", " ", "\x1b[C", " ", "\x1b[C", " ", "a", "b"
    )
    state = game.run(Mode.PVP)
    assert state.winner is Player.CROSS
    assert all(game.board.cell(0, c).marked_by is Player.CROSS for c in range(3))
    assert state.fields_marked == marked(game.board)
    assert "Cross Wins!" in out.getvalue()


def test_quit_ends_in_tie():
    game, _, out = make_game("s", "q", "a", "b")
    state = game.run(Mode.PVP)
    assert state.winner is Player.NONE
    assert state.fields_marked == 0
    text = out.getvalue()
    assert "It's a Tie!" in text
    assert "Game Over!" in text


def test_closed_input_quits_and_summary_needs_a_key():
    game, _, _ = make_game("s")
    with pytest.raises(EOFError):
        game.run(Mode.PVP)
    assert game.state.winner is Player.NONE


def test_pve_computer_moves_first():
    game, _, _ = make_game("s", "q", "a", "b", rng=itertools.count(0).__next__)
    state = game.run(Mode.PVE)
    assert state.current_player is Player.CROSS
    assert count(game.board, Player.CROSS) == 0
    assert count(game.board, Player.CIRCLE) == state.fields_marked


def test_pve_player_mark_triggers_bot():
    game, _, _ = make_game("s", " ", "q", "a", "b", rng=itertools.count(1).__next__)
    state = game.run(Mode.PVE)
    assert game.board.cell(0, 0).marked_by is Player.CROSS
    assert count(game.board, Player.CROSS) == count(game.board, Player.CIRCLE)
    assert state.fields_marked == marked(game.board)
    assert state.round == FIRST_ROUND + 1


def started(*batches, mode=Mode.PVP, rng=None):
    game, keys, out = make_game("s", *batches, rng=rng)
    game.start(mode)
    return game, keys, out


def test_arrow_moves_selection():
    game, keys, _ = started()
    keys.arrive(b"[C")
    assert game.handle_byte(0x1B) is False
    assert game.selected is game.board.cell(0, 1)
    keys.arrive(b"[B")
    game.handle_byte(0x1B)
    assert game.selected is game.board.cell(1, 1)


def test_arrow_stops_at_border():
    game, keys, _ = started()
    keys.arrive(b"[A")
    game.handle_byte(0x1B)
    assert game.selected is game.board.cell(0, 0)
    keys.arrive(b"[D")
    game.handle_byte(0x1B)
    assert game.selected is game.board.cell(0, 0)


def test_arrow_ignored_while_paused():
    game, keys, _ = started()
    game.handle_byte(ord("p"))
    keys.arrive(b"[C")
    game.handle_byte(0x1B)
    assert game.selected is game.board.cell(0, 0)


def test_pause_toggles():
    game, _, _ = started()
    assert game.handle_byte(ord("p")) is False
    assert game.timer.is_running is False
    assert game.handle_byte(ord("P")) is True
    assert game.timer.is_running is True


def test_size_keys():
    game, _, _ = started()
    assert game.handle_byte(ord("+")) is True
    assert game.renderer.size is Size.LARGE
    game.handle_byte(ord("-"))
    game.handle_byte(ord("-"))
    game.handle_byte(ord("-"))
    assert game.renderer.size is Size.SMALL


def test_mark_ignored_while_paused():
    game, _, _ = started()
    game.handle_byte(ord("p"))
    game.handle_byte(ord(" "))
    assert marked(game.board) == 0
    assert game.state.current_player is Player.CROSS


def test_pvp_mark_switches_player():
    game, _, _ = started()
    game.handle_byte(ord("\r"))
    assert game.board.cell(0, 0).marked_by is Player.CROSS
    assert game.last_cross is game.board.cell(0, 0)
    assert game.state.current_player is Player.CIRCLE
    # marking an occupied cell does nothing
    game.handle_byte(ord(" "))
    assert game.state.current_player is Player.CIRCLE


def test_help_key_shows_controls_and_keeps_timer():
    game, _, out = started("k")
    assert game.handle_byte(ord("?")) is True
    assert "Controls:" in out.getvalue()
    assert "Press any key to return to the match..." in out.getvalue()
    assert game.timer.is_running is True


def test_timeout_marks_for_waiting_player():
    game, _, _ = started(rng=itertools.count(1).__next__)
    for _ in range(game.config.ticks_per_turn - 1):
        game.timer.tick()
    assert count(game.board, Player.CROSS) == 1
    assert game.state.current_player is Player.CIRCLE
    assert game.state.fields_marked == marked(game.board)
    assert game.timer.ticks_turn == 0


def test_timeout_in_pve_marks_both():
    game, _, _ = started(mode=Mode.PVE, rng=itertools.count(1).__next__)
    game.on_timeout()
    assert count(game.board, Player.CROSS) == 1
    assert count(game.board, Player.CIRCLE) == 1
    assert game.state.round == FIRST_ROUND + 1
    assert game.state.fields_marked == marked(game.board)


def test_end_turn_cycle():
    game, _, _ = started()
    game.end_turn()
    assert game.state.current_player is Player.CIRCLE
    assert game.state.round == FIRST_ROUND
    game.end_turn()
    assert game.state.current_player is Player.CROSS
    assert game.state.round == FIRST_ROUND + 1


def test_turn_ticks_booked_to_player():
    game, _, _ = started()
    for _ in range(3):
        game.timer.tick()
    game.end_turn()
    assert game.state.cross_total_ticks == 3
    assert game.state.circle_total_ticks == 0


def test_check_winner_column():
    game, _, _ = started()
    column = [game.board.cell(r, 0) for r in range(3)]
    for cell in column:
        cell.marked_by = Player.CIRCLE
    game.last_circle = column[-1]
    winner, cells = game.check_winner()
    assert winner is Player.CIRCLE
    assert cells == column


def test_start_resets_board():
    game, _, _ = started("t")
    game.handle_byte(ord(" "))
    game.start(Mode.PVP)
    assert marked(game.board) == 0
    assert game.state.fields_marked == 0
    assert game.selected is game.board.cell(0, 0)