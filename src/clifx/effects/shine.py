"""One-dimensional shine: a highlight band sweeping across a single line."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from clifx.clock import CycleClock
from clifx.colors import blend
from clifx.config import SweepStart
from clifx.presenter import Presenter

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable, Sequence

    from clifx.config import ShineConfig
    from clifx.presenter import Cell, Origin

log = logging.getLogger(__name__)


def sweep_range(text_length: int, padding: int) -> int:
    """Number of positions the sweep travels, including padding on both sides."""
    return text_length + 2 * padding


def sweep_position(ping_pong: float, text_length: int, padding: int, start: SweepStart) -> int:
    """Character index of the sweep center; negative or past the end while off-text."""
    total_range = sweep_range(text_length, padding)
    travel = ping_pong if start is SweepStart.BEGINNING else 1.0 - ping_pong
    return int(travel * (total_range - 1)) - padding


def normalized_position(position: int, text_length: int, padding: int) -> float:
    return (position + padding) / sweep_range(text_length, padding)


def sweep_intensity(distance: float, width: int, blur: bool) -> float:
    if distance > width:
        return 0.0
    if blur:
        return 1.0 - distance / width
    return 1.0 if distance == 0 else 0.0


def render_line(chars: Sequence[str], position: int, config: ShineConfig) -> list[Cell]:
    """Color every character of the line for a sweep centered at *position*."""
    cells: list[Cell] = []
    for index, char in enumerate(chars):
        distance = abs(index - position)
        if distance <= config.width:
            intensity = sweep_intensity(distance, config.width, config.blur) * config.opacity
            cells.append((char, blend(config.base_color, config.shine_color, intensity)))
        else:
            cells.append((char, config.base_color))
    return cells


def run_shine(
    text: str,
    config: ShineConfig,
    *,
    presenter: Presenter | None = None,
    origin: Origin | None = None,
    sleep: Callable[[float], None] | None = None,
    cancel: threading.Event | None = None,
) -> None:
    """Animate a sweep across *text* until every configured cycle has run.

    Args:
        text: A single line; newlines are not interpreted.
        config: Resolved shine configuration.
        presenter: Output boundary (stdout when omitted).
        origin: Optional (top, left) cell to draw the line at.
        sleep: Blocking sleep in seconds, ``time.sleep`` by default.
        cancel: Stops the animation before the next frame once set.

    Raises:
        OSError: Writing to the output stream failed.
    """
    presenter = presenter or Presenter()
    chars = list(text)
    if not chars:
        presenter.newline()
        return

    clock = CycleClock.from_config(config, sleep=sleep, cancel=cancel)
    log.debug("shine: %d chars, %d frames per cycle", len(chars), clock.total_frames)

    with presenter.animating():
        if origin is not None:
            presenter.move_to(origin)
        presenter.clear_line()

        for tick in clock.ticks():
            position = sweep_position(tick.ping_pong, len(chars), config.padding, config.start)
            clock.pause_at(normalized_position(position, len(chars), config.padding))

            if origin is not None:
                presenter.move_to(origin)
            else:
                presenter.move_to_column(0)
            presenter.draw_row(render_line(chars, position, config))
            presenter.flush()

            clock.pace()

    presenter.newline()
    log.debug("shine: done")
