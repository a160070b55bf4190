"""Twinkle: period characters flare up, hold and fade at random."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from clifx.clock import CycleClock
from clifx.colors import blend
from clifx.limits import DEFAULT_TWINKLE_RATIO, TWINKLE_LIFETIME_FRAMES, TWINKLE_PAUSE_RATIO
from clifx.presenter import Presenter

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable, Mapping, Sequence

    from clifx.config import TwinkleConfig
    from clifx.easing import EasingKind
    from clifx.presenter import Cell, Origin

log = logging.getLogger(__name__)

ANCHOR_GLYPH = "."
DOT_GLYPHS = (".", "·", "•", "⋅", "∘", "○", "●")
STAR_GLYPHS = (".", "✦", "✧", "⋆", "✩", "✪", "✫", "⭐", "*")


class TwinkleStage(Enum):
    GROWING = "growing"
    HOLDING = "holding"
    FADING = "fading"


@dataclass(frozen=True, slots=True)
class TwinkleSlot:
    """A single running twinkle at one anchor position."""

    anchor: int
    phase: float
    duration: float
    pause_ratio: float

    @property
    def ease_span(self) -> float:
        return (1.0 - self.pause_ratio) / 2.0

    @property
    def stage(self) -> TwinkleStage:
        if self.phase <= self.ease_span:
            return TwinkleStage.GROWING
        if self.phase <= self.ease_span + self.pause_ratio:
            return TwinkleStage.HOLDING
        return TwinkleStage.FADING

    @property
    def expired(self) -> bool:
        return self.phase > 1.0

    def aged(self) -> TwinkleSlot:
        return replace(self, phase=self.phase + 1.0 / self.duration)

    def progress(self, easing: EasingKind) -> float:
        """Intensity in [0, 1]: ease up, hold at 1.0, then ease back down."""
        phase = max(0.0, min(1.0, self.phase))
        span = self.ease_span
        stage = self.stage
        if stage is TwinkleStage.GROWING:
            return easing.apply(_unit(phase / span))
        if stage is TwinkleStage.HOLDING:
            return 1.0
        local = (phase - span - self.pause_ratio) / span
        return easing.apply(_unit(1.0 - local))


type SlotMap = dict[int, TwinkleSlot]


def _unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def find_anchors(chars: Sequence[str]) -> list[int]:
    """Indices of every eligible anchor glyph."""
    return [index for index, char in enumerate(chars) if char == ANCHOR_GLYPH]


def target_count(config: TwinkleConfig, anchor_count: int, rng: random.Random) -> int:
    """How many anchors should be twinkling at once this frame.

    Priority: explicit min+max range, ratio of anchors, explicit min, explicit max,
    then the default ratio. Never more than *anchor_count*.
    """
    low, high = config.min_twinkle_count, config.max_twinkle_count
    if low is not None and high is not None:
        upper = min(high, anchor_count)
        return rng.randint(min(low, upper), upper)
    if config.twinkle_ratio is not None:
        return min(anchor_count, max(1, _round_half_up(anchor_count * config.twinkle_ratio)))
    if low is not None:
        return min(low, anchor_count)
    if high is not None:
        return min(high, anchor_count)
    return _round_half_up(anchor_count * DEFAULT_TWINKLE_RATIO)


def spawn_slot(anchor: int, rng: random.Random) -> TwinkleSlot:
    return TwinkleSlot(
        anchor=anchor,
        phase=0.0,
        duration=rng.uniform(*TWINKLE_LIFETIME_FRAMES),
        pause_ratio=rng.uniform(*TWINKLE_PAUSE_RATIO),
    )


def advance(
    slots: Mapping[int, TwinkleSlot],
    anchors: Sequence[int],
    config: TwinkleConfig,
    rng: random.Random,
) -> SlotMap:
    """Advance the slot map by one frame tick.

    Returns a new map; *slots* is left untouched. On frames where the activity roll
    fails the state is carried over unchanged.
    """
    if rng.random() >= config.twinkling_percentage:
        return dict(slots)

    wanted = target_count(config, len(anchors), rng)

    next_slots: SlotMap = {}
    for anchor, slot in slots.items():
        aged = slot.aged()
        if not aged.expired:
            next_slots[anchor] = aged

    available = [anchor for anchor in anchors if anchor not in next_slots]
    while len(next_slots) < wanted and available:
        anchor = available.pop(rng.randrange(len(available)))
        next_slots[anchor] = spawn_slot(anchor, rng)

    return next_slots


def twinkle_glyph(progress: float, star_mode: bool) -> str:
    glyphs = STAR_GLYPHS if star_mode else DOT_GLYPHS
    index = _round_half_up(_unit(progress) * (len(glyphs) - 1))
    return glyphs[min(index, len(glyphs) - 1)]


def render_line(
    chars: Sequence[str], slots: Mapping[int, TwinkleSlot], config: TwinkleConfig
) -> list[Cell]:
    cells: list[Cell] = []
    for index, char in enumerate(chars):
        slot = slots.get(index)
        if slot is None:
            cells.append((char, config.base_color))
            continue
        progress = slot.progress(config.easing)
        color = blend(config.base_color, config.twinkle_color, progress)
        cells.append((twinkle_glyph(progress, config.star_mode), color))
    return cells


class TwinkleEngine:
    """Per-line twinkle state: the anchors and the active slot map."""

    def __init__(
        self,
        text: str,
        config: TwinkleConfig,
        rng: random.Random | None = None,
    ) -> None:
        self.chars = list(text)
        self.config = config
        self.rng = rng or random.Random()
        self.anchors = find_anchors(self.chars)
        self.slots: SlotMap = {}

    @property
    def has_anchors(self) -> bool:
        return bool(self.anchors)

    def step(self) -> SlotMap:
        self.slots = advance(self.slots, self.anchors, self.config, self.rng)
        return self.slots

    def frame(self) -> list[Cell]:
        return render_line(self.chars, self.slots, self.config)


def run_twinkle(
    text: str,
    config: TwinkleConfig,
    *,
    presenter: Presenter | None = None,
    origin: Origin | None = None,
    rng: random.Random | None = None,
    sleep: Callable[[float], None] | None = None,
    cancel: threading.Event | None = None,
) -> None:
    """Twinkle the periods of *text* until every configured cycle has run.

    Text without any period is printed once in the base color and no animation runs.

    Args:
        text: A single line; newlines are not interpreted.
        config: Resolved twinkle configuration.
        presenter: Output boundary (stdout when omitted).
        origin: Optional (top, left) cell to draw the line at.
        rng: Random source; pass a seeded ``random.Random`` for reproducible output.
        sleep: Blocking sleep in seconds, ``time.sleep`` by default.
        cancel: Stops the animation before the next frame once set.

    Raises:
        OSError: Writing to the output stream failed.
    """
    presenter = presenter or Presenter()
    if not text:
        presenter.newline()
        return

    engine = TwinkleEngine(text, config, rng)
    if origin is not None:
        presenter.move_to(origin)

    if not engine.has_anchors:
        presenter.draw_row(engine.frame())
        presenter.newline()
        presenter.flush()
        return

    clock = CycleClock.from_config(config, sleep=sleep, cancel=cancel)
    log.debug(
        "twinkle: %d anchors, %d frames per cycle", len(engine.anchors), clock.total_frames
    )

    with presenter.animating():
        presenter.clear_line()
        for _tick in clock.ticks():
            engine.step()

            if origin is not None:
                presenter.move_to(origin)
            else:
                presenter.move_to_column(0)
            presenter.draw_row(engine.frame())
            presenter.flush()

            clock.pace()

    presenter.newline()
    log.debug("twinkle: done")
