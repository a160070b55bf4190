"""Unit tests for centering offsets."""

from __future__ import annotations

import pytest

from clifx.center import CenteringOffsets, calculate_centering_offsets
from clifx.terminal import TerminalSize

pytestmark = pytest.mark.unit

SCREEN = TerminalSize(columns=80, rows=24)


def test_single_line_is_centered() -> None:
    offsets = calculate_centering_offsets(["Hi"], SCREEN)
    assert offsets == CenteringOffsets(top=11, left=39)


def test_widest_line_sets_left_offset() -> None:
    offsets = calculate_centering_offsets(["a", "abcdefghij", "abc"], SCREEN)
    assert offsets.left == 35
    assert offsets.top == 10


def test_escape_sequences_do_not_count_toward_width() -> None:
    plain = calculate_centering_offsets(["Hi"], SCREEN)
    colored = calculate_centering_offsets(["\x1b[31mHi\x1b[0m"], SCREEN)
    assert plain == colored


def test_oversized_content_anchors_top_left() -> None:
    lines = ["x" * 100] * 30
    assert calculate_centering_offsets(lines, SCREEN) == CenteringOffsets(0, 0)


def test_no_lines() -> None:
    assert calculate_centering_offsets([], SCREEN) == CenteringOffsets(0, 0)


def test_for_line_steps_down_rows() -> None:
    assert CenteringOffsets(top=5, left=3).for_line(2) == (7, 3)


def test_uses_terminal_size_when_not_given(mocker) -> None:
    mocker.patch("clifx.center.get_terminal_size", return_value=TerminalSize(20, 10))
    assert calculate_centering_offsets(["abcd"]) == CenteringOffsets(top=4, left=8)
