"""Easing curves mapping normalized progress to eased progress."""

from __future__ import annotations

from enum import StrEnum


class EasingKind(StrEnum):
    """Easing curve selected once per run.

    Every variant maps 0 to 0 and 1 to 1 and is non-decreasing on [0, 1].
    """

    LINEAR = "linear"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"

    def apply(self, t: float) -> float:
        """Return eased progress for *t* in [0.0, 1.0]."""
        if self is EasingKind.EASE_IN:
            return t * t
        if self is EasingKind.EASE_OUT:
            return 1.0 - (1.0 - t) * (1.0 - t)
        if self is EasingKind.EASE_IN_OUT:
            if t < 0.5:
                return 2.0 * t * t
            return 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0
        return t
