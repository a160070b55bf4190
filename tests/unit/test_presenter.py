"""Unit tests for the terminal presenter."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.unit


def test_draw_row_colors_each_glyph(presenter, output) -> None:
    presenter.draw_row([("a", (1, 2, 3)), ("b", (4, 5, 6))])
    text = output.getvalue()
    assert "\x1b[38;2;1;2;3m" in text
    assert "\x1b[38;2;4;5;6m" in text
    assert "\n" not in text


def test_animating_restores_cursor_on_error(presenter, output) -> None:
    with pytest.raises(RuntimeError), presenter.animating():
        raise RuntimeError("boom")
    text = output.getvalue()
    assert text.index("\x1b[?25l") < text.index("\x1b[?25h")


def test_cursor_movement(presenter, output) -> None:
    presenter.move_to((2, 5))
    presenter.move_to_column(0)
    presenter.move_up(3)
    presenter.move_up(0)
    assert output.getvalue() == "\x1b[3;6H\x1b[1G\x1b[3A"


def test_clear_screen_homes_cursor(presenter, output) -> None:
    presenter.clear_screen()
    assert output.getvalue() == "\x1b[2J\x1b[H"


def test_newline(presenter, output) -> None:
    presenter.newline()
    assert output.getvalue() == "\n"
