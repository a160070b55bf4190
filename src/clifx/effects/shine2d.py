"""Two-dimensional shine: an angled sweep line crossing a wrapped block of text."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from clifx.clock import CycleClock
from clifx.colors import blend
from clifx.config import SweepStart
from clifx.limits import ANGLE_EPSILON, HARD_EDGE_DISTANCE
from clifx.presenter import Presenter
from clifx.terminal import get_terminal_size

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable

    from clifx.config import Shine2DConfig
    from clifx.presenter import Cell, Origin

log = logging.getLogger(__name__)

type CharacterGrid = list[list[str]]


def wrap_text_to_grid(text: str, width: int) -> CharacterGrid:
    """Greedily wrap *text* into rows of at most *width* glyphs.

    A newline always ends the current row (so blank lines survive); a row also ends
    as soon as it reaches *width*. A trailing partial row is kept.
    """
    grid: CharacterGrid = []
    row: list[str] = []
    for char in text:
        if char == "\n":
            grid.append(row)
            row = []
            continue
        row.append(char)
        if len(row) >= width:
            grid.append(row)
            row = []
    if row:
        grid.append(row)
    return grid


def grid_size(grid: CharacterGrid) -> tuple[int, int]:
    """Return (widest row, row count)."""
    return max((len(row) for row in grid), default=0), len(grid)


def sweep_range(grid_width: int, grid_height: int, padding: int) -> float:
    diagonal = math.sqrt(grid_width * grid_width + grid_height * grid_height)
    return diagonal + 2 * padding


def sweep_line_position(
    ping_pong: float, shine_range: float, padding: int, start: SweepStart
) -> float:
    travel = ping_pong if start is SweepStart.BEGINNING else 1.0 - ping_pong
    return travel * shine_range - padding


def line_distance(x: int, y: int, shine_line: float, angle: float) -> float:
    """Distance from cell (x, y) to the line ``cos(a)x + sin(a)y = shine_line``."""
    if abs(angle) < ANGLE_EPSILON:
        return abs(y - shine_line)
    if abs(angle - 90.0) < ANGLE_EPSILON:
        return abs(x - shine_line)
    radians = math.radians(angle)
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    return abs(cos_a * x + sin_a * y - shine_line) / math.sqrt(cos_a * cos_a + sin_a * sin_a)


def planar_intensity(distance: float, width: float, blur: bool) -> float:
    if distance > width:
        return 0.0
    if blur:
        return 1.0 - distance / width
    return 1.0 if distance <= HARD_EDGE_DISTANCE else 0.0


def render_grid(
    grid: CharacterGrid, shine_line: float, config: Shine2DConfig
) -> list[list[Cell]]:
    """Color every cell of the grid for the sweep line at *shine_line*."""
    rows: list[list[Cell]] = []
    for y, line in enumerate(grid):
        cells: list[Cell] = []
        for x, char in enumerate(line):
            distance = line_distance(x, y, shine_line, config.angle)
            intensity = planar_intensity(distance, config.width, config.blur)
            if intensity > 0.0:
                color = blend(config.base_color, config.shine_color, intensity * config.opacity)
            else:
                color = config.base_color
            cells.append((char, color))
        rows.append(cells)
    return rows


def resolve_wrap_width(config: Shine2DConfig) -> int:
    if config.terminal_width is not None:
        return config.terminal_width
    return get_terminal_size().columns


def run_shine2d(
    text: str,
    config: Shine2DConfig,
    *,
    presenter: Presenter | None = None,
    origin: Origin | None = None,
    sleep: Callable[[float], None] | None = None,
    cancel: threading.Event | None = None,
) -> None:
    """Animate an angled sweep over the whole block of *text*.

    Args:
        text: Block of text; newlines force row breaks.
        config: Resolved shine2d configuration.
        presenter: Output boundary (stdout when omitted).
        origin: Optional (top, left) cell for the block's top-left corner.
        sleep: Blocking sleep in seconds, ``time.sleep`` by default.
        cancel: Stops the animation before the next frame once set.

    Raises:
        OSError: Writing to the output stream failed.
    """
    presenter = presenter or Presenter()
    if not text:
        presenter.newline()
        return

    grid = wrap_text_to_grid(text, resolve_wrap_width(config))
    grid_width, grid_height = grid_size(grid)
    if grid_height == 0 or grid_width == 0:
        presenter.newline()
        return

    shine_range = sweep_range(grid_width, grid_height, config.padding)
    clock = CycleClock.from_config(config, sleep=sleep, cancel=cancel)
    log.debug(
        "shine2d: %dx%d grid, angle=%.2f, %d frames per cycle",
        grid_width,
        grid_height,
        config.angle,
        clock.total_frames,
    )

    left = origin[1] if origin is not None else 0
    drawn = False
    with presenter.animating():
        for tick in clock.ticks():
            shine_line = sweep_line_position(
                tick.ping_pong, shine_range, config.padding, config.start
            )
            clock.pause_at((shine_line + config.padding) / shine_range)

            if origin is not None:
                presenter.move_to(origin)
            elif drawn:
                presenter.move_up(grid_height - 1)

            rows = render_grid(grid, shine_line, config)
            for y, cells in enumerate(rows):
                presenter.move_to_column(left)
                presenter.draw_row(cells)
                if y < len(rows) - 1:
                    presenter.newline()
            presenter.flush()
            drawn = True

            clock.pace()

    presenter.newline()
    log.debug("shine2d: done")
