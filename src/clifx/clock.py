"""Frame clock and cycle controller shared by every effect."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from clifx.easing import EasingKind
from clifx.limits import PAUSE_TOLERANCE

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable, Iterator

    from clifx.config import CycleConfig

log = logging.getLogger(__name__)


def ping_pong(eased: float) -> float:
    """Fold eased progress into a forward-then-reverse value within one cycle."""
    if eased < 0.5:
        return eased * 2.0
    return 2.0 - eased * 2.0


@dataclass(frozen=True, slots=True)
class FrameTick:
    """Where a single frame sits within the animation."""

    cycle: int
    frame: int
    progress: float
    eased: float
    ping_pong: float


class CycleClock:
    """Turns frame indices into ping-ponging progress and injects configured delays.

    All durations are milliseconds. Delays are blocking sleeps and fire before the
    frame they belong to is drawn (post-cycle delay fires after the last frame).
    """

    def __init__(
        self,
        *,
        speed: int,
        duration: int,
        cycles: int,
        easing: EasingKind = EasingKind.LINEAR,
        pause_length: int | None = None,
        pause_position: float = 0.5,
        pre_delay: int | None = None,
        post_delay: int | None = None,
        switchback_delay: int | None = None,
        sleep: Callable[[float], None] | None = None,
        cancel: threading.Event | None = None,
    ) -> None:
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}")
        self.speed = speed
        self.duration = duration
        self.cycles = cycles
        self.easing = easing
        self.pause_length = pause_length
        self.pause_position = pause_position
        self.pre_delay = pre_delay
        self.post_delay = post_delay
        self.switchback_delay = switchback_delay
        self._sleep = sleep or time.sleep
        self._cancel = cancel

    @classmethod
    def from_config(
        cls,
        config: CycleConfig,
        *,
        sleep: Callable[[float], None] | None = None,
        cancel: threading.Event | None = None,
    ) -> CycleClock:
        return cls(
            speed=config.speed,
            duration=config.duration,
            cycles=config.cycles,
            easing=config.easing,
            pause_length=config.pause_length,
            pause_position=config.pause_position,
            pre_delay=config.cycle_pre_delay,
            post_delay=config.cycle_post_delay,
            switchback_delay=config.cycle_switchback_delay,
            sleep=sleep,
            cancel=cancel,
        )

    @property
    def total_frames(self) -> int:
        return max(1, self.duration // self.speed)

    @property
    def cancelled(self) -> bool:
        return self._cancel is not None and self._cancel.is_set()

    def linear_progress(self, frame: int) -> float:
        if self.total_frames == 1:
            return 0.0
        return frame / (self.total_frames - 1)

    def eased_progress(self, frame: int) -> float:
        return self.easing.apply(self.linear_progress(frame))

    def is_switchback(self, frame: int) -> bool:
        """True on the frame where eased progress crosses 0.5 going forward."""
        if frame == 0:
            return False
        return self.eased_progress(frame - 1) < 0.5 <= self.eased_progress(frame)

    def ticks(self) -> Iterator[FrameTick]:
        """Yield every frame of every cycle, sleeping for the cycle delays.

        Runs forever when ``cycles`` is 0, unless the cancel event is set.
        """
        log.debug(
            "Clock start: %d frames per cycle, cycles=%s",
            self.total_frames,
            self.cycles or "unbounded",
        )
        cycle = 0
        while self.cycles == 0 or cycle < self.cycles:
            if self.cancelled:
                return
            self._delay(self.pre_delay)

            for frame in range(self.total_frames):
                if self.cancelled:
                    return
                progress = self.linear_progress(frame)
                eased = self.easing.apply(progress)
                if self.switchback_delay is not None and self.is_switchback(frame):
                    self._delay(self.switchback_delay)
                yield FrameTick(
                    cycle=cycle,
                    frame=frame,
                    progress=progress,
                    eased=eased,
                    ping_pong=ping_pong(eased),
                )

            self._delay(self.post_delay)
            cycle += 1

    def should_pause(self, normalized_position: float) -> bool:
        if self.pause_length is None:
            return False
        return abs(normalized_position - self.pause_position) < PAUSE_TOLERANCE

    def pause_at(self, normalized_position: float) -> bool:
        """Sleep for the pause length when the sweep sits inside the pause band."""
        if not self.should_pause(normalized_position):
            return False
        self._delay(self.pause_length)
        return True

    def pace(self) -> None:
        """Sleep one frame interval."""
        self._delay(self.speed)

    def _delay(self, milliseconds: int | None) -> None:
        if milliseconds is None:
            return
        self._sleep(milliseconds / 1000)
