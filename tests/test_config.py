import pytest

from tiktaktoe.config import GameConfig


def test_defaults_match_configuration():
    config = GameConfig()
    assert config.rows == 3
    assert config.cols == 3
    assert config.ticks_per_turn == 20
    assert config.tick_speed == 12
    assert config.unicode is True
    assert config.ascii_art is True


def test_diagonal_length_is_shorter_side():
    assert GameConfig(rows=2, cols=5).diagonal_length() == 2
    assert GameConfig(rows=6, cols=4).diagonal_length() == 4


def test_max_line_is_longer_side():
    assert GameConfig(rows=2, cols=5).max_line() == 5
    assert GameConfig(rows=6, cols=4).max_line() == 6


def test_cell_count_single_row():
    assert GameConfig(rows=1, cols=7).cell_count() == 7


def test_square_field_lines_agree():
    config = GameConfig(rows=4, cols=4)
    assert config.diagonal_length() == config.max_line() == 4


@pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
def test_empty_field_rejected(rows, cols):
    with pytest.raises(ValueError):
        GameConfig(rows=rows, cols=cols)


def test_zero_ticks_per_turn_rejected():
    with pytest.raises(ValueError):
        GameConfig(ticks_per_turn=0)


def test_negative_tick_speed_rejected():
    with pytest.raises(ValueError):
        GameConfig(tick_speed=-1)


def test_faster_tick_speed_gives_shorter_ticks():
    assert GameConfig(tick_speed=4).tick_seconds < GameConfig(tick_speed=12).tick_seconds