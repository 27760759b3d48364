from tiktaktoe import style
from tiktaktoe.style import Style


def test_empty_style_has_no_codes():
    assert Style().codes() == ""


def test_single_colour_codes():
    assert Style(fg_color=style.FG_GREEN).codes() == "\x1b[32m"


def test_codes_order_foreground_background_font():
    combined = Style(fg_color=style.FG_RED, bg_color=style.BG_YELLOW, font_style=style.BOLD)
    assert combined.codes() == style.FG_RED + style.BG_YELLOW + style.BOLD


def test_bold_cross_codes():
    assert style.BOLD_CROSS.codes() == style.FG_GREEN + style.BOLD


def test_bold_dim_puts_dim_in_colour_slot():
    assert style.BOLD_DIM.codes() == style.DIM + style.BOLD


def test_apply_wraps_and_resets():
    result = style.HEADING_STYLE.apply("hi")
    assert result.startswith(style.HEADING_STYLE.codes())
    assert result.endswith(style.RESET)
    assert "hi" in result


def test_apply_on_empty_style_only_resets():
    assert Style().apply("x") == "x" + style.RESET


def test_apply_ends_with_reset_sequence():
    result = Style(font_style=style.ITALIC).apply("text")
    assert result == "\x1b[3mtext\x1b[0m"