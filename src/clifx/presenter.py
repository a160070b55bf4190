"""Terminal output boundary: cursor control and colored glyph emission."""

from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import TYPE_CHECKING

from rich.color import Color
from rich.console import Console
from rich.control import Control, ControlType
from rich.style import Style
from rich.text import Text

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import TextIO

    from clifx.colors import RGB

type Cell = tuple[str, RGB]
type Origin = tuple[int, int]


@lru_cache(maxsize=1024)
def _style_for(color: RGB) -> Style:
    return Style(color=Color.from_rgb(*color))


class Presenter:
    """Writes frames of colored cells to a single text stream.

    Every write goes through a rich ``Console`` which flushes after each call, so an
    ``OSError`` from the stream surfaces at the call that caused it.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(
            force_terminal=True,
            color_system="truecolor",
            soft_wrap=True,
            highlight=False,
            markup=False,
            emoji=False,
        )

    @classmethod
    def for_stream(cls, file: TextIO) -> Presenter:
        """Presenter writing truecolor escapes to *file* regardless of its tty status."""
        return cls(
            Console(
                file=file,
                force_terminal=True,
                color_system="truecolor",
                no_color=False,
                soft_wrap=True,
                highlight=False,
                markup=False,
                emoji=False,
                width=1000,
            )
        )

    @contextmanager
    def animating(self) -> Iterator[None]:
        """Hide the cursor for the duration of an animation and always restore it."""
        self.console.show_cursor(False)
        try:
            yield
        finally:
            self.console.show_cursor(True)

    def move_to(self, origin: Origin) -> None:
        top, left = origin
        self.console.control(Control.move_to(left, top))

    def move_to_column(self, column: int) -> None:
        self.console.control(Control.move_to_column(column))

    def move_up(self, rows: int) -> None:
        if rows > 0:
            self.console.control(Control.move(0, -rows))

    def clear_line(self) -> None:
        self.console.control(Control((ControlType.ERASE_IN_LINE, 2)))

    def clear_screen(self) -> None:
        self.console.control(Control.clear(), Control.home())

    def draw_row(self, cells: Iterable[Cell]) -> None:
        """Emit one row of glyphs, each in its own foreground color."""
        text = Text(end="")
        for glyph, color in cells:
            text.append(glyph, style=_style_for(color))
        self.console.print(text, end="", soft_wrap=True)

    def newline(self) -> None:
        self.console.line()

    def flush(self) -> None:
        self.console.file.flush()
