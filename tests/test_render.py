import io

import pytest

from tiktaktoe.art import FIELD_X_OFFSET, glyphs
from tiktaktoe.board import Board, Player
from tiktaktoe.config import GameConfig
from tiktaktoe.render import FieldRenderer, Size, cell_pattern
from tiktaktoe.style import DEFAULT_CROSS, HIDDEN, INVERSE, RESET
from tiktaktoe.terminal import Terminal, move_sequence


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def renderer(stream):
    return FieldRenderer(Terminal(stream), GameConfig())


def _take(stream):
    text = stream.getvalue()
    stream.seek(0)
    stream.truncate(0)
    return text


def test_initial_size_is_medium(renderer):
    assert renderer.size is Size.MEDIUM


def test_increase_clamps_at_large(renderer):
    for _ in range(3):
        renderer.increase_size()
    assert renderer.size is Size.LARGE


def test_decrease_clamps_at_small(renderer):
    for _ in range(3):
        renderer.decrease_size()
    assert renderer.size is Size.SMALL


def test_field_height_grows_with_size(renderer):
    renderer.decrease_size()
    heights = []
    for _ in range(3):
        heights.append(renderer.field_height())
        renderer.increase_size()
    assert heights == sorted(set(heights))
    assert len(heights) == 3


@pytest.mark.parametrize("size", list(Size))
@pytest.mark.parametrize("player", list(Player))
@pytest.mark.parametrize("unicode", [True, False])
def test_pattern_fits_cell(size, player, unicode):
    pattern = cell_pattern(size, player, glyphs(unicode))
    assert len(pattern) == size.height - 2
    assert all(len(row) == size.width - 1 for row in pattern)


def test_small_cross_pattern():
    assert cell_pattern(Size.SMALL, Player.CROSS, glyphs()) == ((" ", "X", " "),)


def test_medium_circle_unicode_corners():
    pattern = cell_pattern(Size.MEDIUM, Player.CIRCLE, glyphs(True))
    assert pattern[0][1] == "╭"
    assert pattern[1][1] == "│"
    assert pattern[2][5] == "╯"


def test_large_cross_ascii_center():
    pattern = cell_pattern(Size.LARGE, Player.CROSS, glyphs(False))
    assert pattern[2][4] == "X"
    assert pattern[0][2] == "\\"


def test_empty_pattern_is_blank():
    pattern = cell_pattern(Size.LARGE, Player.NONE, glyphs())
    assert {char for row in pattern for char in row} == {" "}


def test_redraw_field_frame(renderer, stream):
    renderer.redraw_field()
    out = _take(stream)
    prefix = move_sequence(FIELD_X_OFFSET, renderer.art.field_y_offset)
    assert out.startswith(prefix)
    lines = out[len(prefix):].split("\n")
    assert lines[-1] == ""
    lines = lines[:-1]
    config = renderer.config
    assert all(len(line) == config.cols * renderer.size.width + 1 for line in lines)
    assert lines[0][0] == "╭" and lines[0][-1] == "╮"
    assert lines[-1][0] == "╰" and lines[-1][-1] == "╯"
    assert lines[0].count("┬") == config.cols - 1
    assert sum(line.startswith("├") for line in lines) == config.rows - 1


def test_redraw_cell_starts_inside_frame(renderer, stream):
    board = Board()
    cell = board.cell(0, 0)
    cell.marked_by = Player.CROSS
    renderer.redraw_cell(cell)
    out = _take(stream)
    assert out.startswith(move_sequence(FIELD_X_OFFSET + 1, renderer.art.field_y_offset + 1))
    assert out.count(RESET) == renderer.size.height - 2
    plain = out.replace(DEFAULT_CROSS.codes(), "")
    for row in cell_pattern(renderer.size, Player.CROSS, renderer.glyphs):
        assert "".join(row) in plain


def test_select_restores_previous(renderer, stream):
    board = Board()
    lines = renderer.size.height - 2
    renderer.select(board.cell(0, 0))
    first = _take(stream).split(RESET)[:-1]
    assert len(first) == lines
    assert all(INVERSE in segment for segment in first)

    renderer.select(board.cell(1, 1))
    second = _take(stream).split(RESET)[:-1]
    assert len(second) == 2 * lines
    assert all(INVERSE not in segment for segment in second[:lines])
    assert all(INVERSE in segment for segment in second[lines:])


def test_redraw_all_draws_every_cell(renderer, stream):
    board = Board()
    renderer.increase_size()
    renderer.redraw_all(board, HIDDEN)
    segments = _take(stream).split(RESET)[:-1]
    assert len(segments) == len(board) * (Size.LARGE.height - 2)
    assert all(HIDDEN in segment for segment in segments)