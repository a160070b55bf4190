"""Centering a block of text inside the terminal viewport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from clifx.ansi import visible_width
from clifx.terminal import get_terminal_size

if TYPE_CHECKING:
    from collections.abc import Sequence

    from clifx.terminal import TerminalSize


@dataclass(frozen=True, slots=True)
class CenteringOffsets:
    """Top-left draw origin for a centered block."""

    top: int = 0
    left: int = 0

    def for_line(self, index: int) -> tuple[int, int]:
        """Origin (top, left) for the *index*-th line of the block."""
        return self.top + index, self.left


def calculate_centering_offsets(
    lines: Sequence[str],
    size: TerminalSize | None = None,
) -> CenteringOffsets:
    """Compute the offsets that center *lines* in the terminal.

    Width is measured in characters after stripping ANSI escape sequences.
    Content larger than the viewport is anchored at the top-left corner.
    """
    if not lines:
        return CenteringOffsets()

    columns, rows = size or get_terminal_size()
    content_height = len(lines)
    content_width = max(visible_width(line) for line in lines)

    top = (rows - content_height) // 2 if rows > content_height else 0
    left = (columns - content_width) // 2 if columns > content_width else 0
    return CenteringOffsets(top=top, left=left)
