"""Unit tests for the angled two-dimensional sweep."""

from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from clifx.ansi import strip_ansi
from clifx.config import Shine2DConfig, SweepStart
from clifx.effects.shine2d import (
    grid_size,
    line_distance,
    planar_intensity,
    render_grid,
    resolve_wrap_width,
    run_shine2d,
    sweep_line_position,
    sweep_range,
    wrap_text_to_grid,
)
from clifx.terminal import TerminalSize

pytestmark = pytest.mark.unit


class TestWrap:
    def test_breaks_rows_at_width(self) -> None:
        grid = wrap_text_to_grid("abcdef", 4)
        assert grid == [list("abcd"), list("ef")]

    def test_newlines_force_breaks_and_keep_blank_rows(self) -> None:
        assert wrap_text_to_grid("ab\n\ncd", 10) == [list("ab"), [], list("cd")]

    def test_exact_fit_does_not_add_empty_row(self) -> None:
        assert wrap_text_to_grid("abcd", 4) == [list("abcd")]

    @given(
        st.text(alphabet="ab \n", max_size=60),
        st.integers(min_value=1, max_value=20),
    )
    def test_rows_never_exceed_width(self, text: str, width: int) -> None:
        grid = wrap_text_to_grid(text, width)
        assert all(len(row) <= width for row in grid)
        assert "".join("".join(row) for row in grid) == text.replace("\n", "")

    def test_grid_size(self) -> None:
        assert grid_size([list("abc"), list("a")]) == (3, 2)
        assert grid_size([]) == (0, 0)


class TestGeometry:
    def test_sweep_range_is_diagonal_plus_padding(self) -> None:
        assert sweep_range(3, 4, 5) == pytest.approx(15.0)

    def test_sweep_line_position_direction(self) -> None:
        assert sweep_line_position(0.0, 15.0, 5, SweepStart.BEGINNING) == -5.0
        assert sweep_line_position(1.0, 15.0, 5, SweepStart.BEGINNING) == 10.0
        assert sweep_line_position(0.0, 15.0, 5, SweepStart.END) == 10.0

    def test_horizontal_line_measures_rows(self) -> None:
        assert line_distance(7, 2, 0.5, 0.0) == pytest.approx(1.5)
        assert line_distance(7, 2, 0.5, 0.001) == pytest.approx(1.5)

    def test_vertical_line_measures_columns(self) -> None:
        assert line_distance(3, 9, 1.0, 90.0) == pytest.approx(2.0)
        assert line_distance(3, 9, 1.0, 89.999) == pytest.approx(2.0)

    def test_general_formula_near_zero_measures_columns(self) -> None:
        # cos(a)x + sin(a)y = c is a vertical line at a ~ 0, unlike the 0 degree case
        assert line_distance(7, 2, 0.5, 0.02) == pytest.approx(6.5, rel=1e-3)
        assert line_distance(7, 2, 0.5, 0.02) != pytest.approx(line_distance(7, 2, 0.5, 0.0))

    def test_general_formula_near_ninety_measures_rows(self) -> None:
        assert line_distance(3, 9, 1.0, 89.98) == pytest.approx(8.0, rel=1e-3)
        assert line_distance(3, 9, 1.0, 89.98) != pytest.approx(line_distance(3, 9, 1.0, 90.0))

    def test_diagonal_distance(self) -> None:
        expected = abs(math.cos(math.radians(45)) * 2 + math.sin(math.radians(45)) * 2 - 1.0)
        assert line_distance(2, 2, 1.0, 45.0) == pytest.approx(expected)

    def test_blurred_intensity(self) -> None:
        assert planar_intensity(0.0, 3, True) == 1.0
        assert planar_intensity(1.5, 3, True) == pytest.approx(0.5)
        assert planar_intensity(3.5, 3, True) == 0.0

    def test_hard_edge_intensity(self) -> None:
        assert planar_intensity(0.5, 3, False) == 1.0
        assert planar_intensity(0.6, 3, False) == 0.0


class TestRenderGrid:
    def test_vertical_line_highlights_a_column(self) -> None:
        config = Shine2DConfig(
            base_color=(0, 0, 0), shine_color=(255, 255, 0), width=1, blur=False, angle=90.0
        )
        rows = render_grid([list("abc"), list("def")], 1.0, config)
        for row in rows:
            assert [color for _, color in row] == [(0, 0, 0), (255, 255, 0), (0, 0, 0)]


class TestWrapWidth:
    def test_explicit_width_wins(self) -> None:
        assert resolve_wrap_width(Shine2DConfig(terminal_width=12)) == 12

    def test_falls_back_to_terminal_columns(self, mocker) -> None:
        mocker.patch(
            "clifx.effects.shine2d.get_terminal_size", return_value=TerminalSize(42, 10)
        )
        assert resolve_wrap_width(Shine2DConfig()) == 42


class TestRunShine2D:
    def test_rows_separated_by_newlines(self, presenter, output, sleeps) -> None:
        config = Shine2DConfig(speed=50, duration=100, terminal_width=10)
        run_shine2d("ab\ncd", config, presenter=presenter, sleep=sleeps.append)

        text = output.getvalue()
        # one newline between the two rows per frame, plus the trailing one
        assert text.count("\n") == 3
        assert strip_ansi(text).replace("\n", "").count("abcd") == 2
        assert sleeps == [0.05, 0.05]

    def test_redraw_moves_cursor_back_up(self, presenter, output, sleeps) -> None:
        config = Shine2DConfig(speed=50, duration=100, terminal_width=10)
        run_shine2d("ab\ncd\nef", config, presenter=presenter, sleep=sleeps.append)
        assert "\x1b[2A" in output.getvalue()

    def test_empty_text_only_prints_newline(self, presenter, output, sleeps) -> None:
        run_shine2d("", Shine2DConfig(terminal_width=10), presenter=presenter, sleep=sleeps.append)
        assert output.getvalue() == "\n"
        assert sleeps == []

    def test_wraps_long_text(self, presenter, output, sleeps) -> None:
        config = Shine2DConfig(speed=50, duration=50, terminal_width=4)
        run_shine2d("abcdefgh", config, presenter=presenter, sleep=sleeps.append)
        assert output.getvalue().count("\n") == 2
