from msglogger.core.colors import (
    BACKGROUND_CODES, CLEAR_LINE, TEXT_CODES, Color, DisplayColors, ResetTarget,
    background_sequence, reset_sequence, strip_ansi, text_sequence,
)
import pytest


def test_every_color_has_both_sequences():
    assert set(TEXT_CODES) == set(Color)
    assert set(BACKGROUND_CODES) == set(Color)
    assert len(Color) == 17


def test_base_colors_cancel_bold_and_bright_colors_are_bold():
    assert text_sequence(Color.RED) == "\x1b[22;38;5;1m"
    assert text_sequence(Color.WHITE) == "\x1b[22;38;5;7m"
    assert text_sequence(Color.BRIGHT_RED) == "\x1b[1;38;5;9m"
    assert text_sequence(Color.BRIGHT_WHITE) == "\x1b[1;38;5;15m"
    assert text_sequence(Color.DEFAULT) == "\x1b[22;39m"


def test_background_always_clears_rest_of_line():
    assert background_sequence(Color.BLACK) == "\x1b[48;5;0m\x1b[K"
    assert background_sequence(Color.BRIGHT_CYAN) == "\x1b[48;5;14m\x1b[K"
    assert background_sequence(Color.DEFAULT) == "\x1b[49m" + CLEAR_LINE


def test_reset_targets():
    assert reset_sequence(ResetTarget.TEXT) == "\x1b[22;39m"
    assert reset_sequence(ResetTarget.BACKGROUND) == "\x1b[49m\x1b[K"
    assert reset_sequence(ResetTarget.BOTH) == "\x1b[0m\x1b[K"
    assert reset_sequence() == reset_sequence(ResetTarget.BOTH)


def test_color_parse_accepts_names():
    assert Color.parse("bright_red") is Color.BRIGHT_RED
    assert Color.parse("Bright-Blue") is Color.BRIGHT_BLUE
    assert Color.parse(Color.CYAN) is Color.CYAN
    with pytest.raises(ValueError):
        Color.parse("ultraviolet")


def test_display_colors_copy_is_independent():
    original = DisplayColors(Color.RED, Color.BLUE)
    dup = original.copy()
    dup.text_color = Color.GREEN
    assert original.text_color is Color.RED
    assert dup == DisplayColors(Color.GREEN, Color.BLUE)


def test_display_colors_dict_form():
    colors = DisplayColors(Color.BRIGHT_BLACK, Color.CYAN)
    assert colors.to_dict() == {"text": "bright_black", "background": "cyan"}
    assert DisplayColors.from_dict(colors.to_dict()) == colors
    assert DisplayColors.from_dict({}) == DisplayColors()


def test_strip_ansi():
    painted = text_sequence(Color.RED) + background_sequence(Color.BLUE) + "hi" + reset_sequence()
    assert strip_ansi(painted) == "hi"
