"""RGB color helpers: parsing, blending and random accent generation."""

from __future__ import annotations

import colorsys
import random

type RGB = tuple[int, int, int]


def blend(base: RGB, target: RGB, intensity: float) -> RGB:
    """Linearly interpolate between two RGB colors.

    Args:
        base: Color returned at intensity 0.0.
        target: Color returned at intensity 1.0.
        intensity: Blend factor, clamped to [0.0, 1.0].

    Returns:
        Blended color with each channel truncated to an integer.
    """
    intensity = max(0.0, min(1.0, intensity))
    r1, g1, b1 = base
    r2, g2, b2 = target
    return (
        int(r1 * (1.0 - intensity) + r2 * intensity),
        int(g1 * (1.0 - intensity) + g2 * intensity),
        int(b1 * (1.0 - intensity) + b2 * intensity),
    )


def parse_rgb(value: str) -> RGB:
    """Parse an ``r,g,b`` string into an RGB tuple.

    Whitespace around each component is ignored.

    Raises:
        ValueError: If the string is not three comma-separated integers in 0-255.
    """
    parts = value.split(",")
    if len(parts) != 3:
        raise ValueError("Color must be in RGB format: r,g,b (e.g., 255,255,0)")

    channels: list[int] = []
    for part in parts:
        part = part.strip()
        if not part.isdigit():
            raise ValueError(f"Invalid color component: {part!r}")
        channel = int(part)
        if channel > 255:
            raise ValueError(f"Color component out of range (0-255): {channel}")
        channels.append(channel)
    r, g, b = channels
    return r, g, b


def format_rgb(color: RGB) -> str:
    """Format an RGB tuple as ``r,g,b``."""
    return ",".join(str(channel) for channel in color)


def random_saturated_color(rng: random.Random | None = None) -> RGB:
    """Pick a fully saturated, full brightness color with a random hue."""
    rng = rng or random.Random()
    hue = rng.uniform(0.0, 360.0)
    r, g, b = colorsys.hsv_to_rgb(hue / 360.0, 1.0, 1.0)
    return int(r * 255), int(g * 255), int(b * 255)
