"""clifx: animated shine and twinkle effects for text piped into a terminal."""

from clifx.colors import blend
from clifx.easing import EasingKind
from clifx.effects import run_shine, run_shine2d, run_twinkle
from clifx.version import get_clifx_version

__version__ = get_clifx_version()

__all__ = ["EasingKind", "blend", "run_shine", "run_shine2d", "run_twinkle"]
