"""Numeric limits and animation constants - no circular dependencies."""

from __future__ import annotations

import os


def _is_debug_build() -> bool:
    """Check if debug logging should be on by default.

    Debug mode is enabled when:
    1. CLIFX_DEBUG env var is set to "1" or "true" (explicit override)
    2. Version contains "dev", "a", "b" or "rc" (pre-release or local checkout)

    Production releases (e.g., "0.1.0") have debug disabled by default.
    """
    env_debug = os.environ.get("CLIFX_DEBUG", "").lower()
    if env_debug in ("1", "true"):
        return True
    if env_debug in ("0", "false"):
        return False

    from clifx.version import get_clifx_version

    version_lower = get_clifx_version().lower()
    return any(indicator in version_lower for indicator in ("dev", "a", "b", "rc"))


DEBUG_BUILD: bool = _is_debug_build()
"""True for pre-release/dev builds or CLIFX_DEBUG=1."""


# Sweep geometry
PAUSE_TOLERANCE = 0.05
ANGLE_EPSILON = 0.01
HARD_EDGE_DISTANCE = 0.5

# Twinkle slot randomization (uniform ranges, upper bound exclusive)
TWINKLE_LIFETIME_FRAMES = (20.0, 60.0)
TWINKLE_PAUSE_RATIO = (0.1, 0.2)
DEFAULT_TWINKLE_RATIO = 0.3

FALLBACK_TERMINAL_WIDTH = 80
FALLBACK_TERMINAL_HEIGHT = 24
