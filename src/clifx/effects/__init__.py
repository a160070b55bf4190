"""Animated text effects. Each ``run_*`` call blocks until its animation completes."""

from clifx.effects.shine import run_shine
from clifx.effects.shine2d import run_shine2d
from clifx.effects.twinkle import run_twinkle

__all__ = ["run_shine", "run_shine2d", "run_twinkle"]
