"""``clifx twinkle``: make the periods of each input line twinkle."""

from __future__ import annotations

import random

import click

from clifx.cli.options import (
    EASING_CHOICES,
    RGB_COLOR,
    CliState,
    build_config,
    clamp_unit,
    read_input_lines,
    terminal_errors,
)
from clifx.config import TwinkleConfig
from clifx.easing import EasingKind
from clifx.effects.twinkle import run_twinkle
from clifx.limits import DEFAULT_TWINKLE_RATIO
from clifx.presenter import Presenter


@click.command()
@click.option(
    "--base-color",
    type=RGB_COLOR,
    default="255,255,255",
    show_default=True,
    help="Base color as RGB values",
)
@click.option(
    "--twinkle-color",
    type=RGB_COLOR,
    default="255,255,0",
    show_default=True,
    help="Twinkle color as RGB values",
)
@click.option(
    "--speed",
    type=int,
    default=100,
    show_default=True,
    help="Animation speed in milliseconds between frames",
)
@click.option(
    "--easing",
    type=click.Choice(EASING_CHOICES, case_sensitive=False),
    default=EasingKind.LINEAR.value,
    show_default=True,
    help="Easing function for the twinkle animation",
)
@click.option(
    "--duration",
    type=int,
    default=3000,
    show_default=True,
    help="Duration of one complete cycle in milliseconds",
)
@click.option(
    "--cycles",
    type=int,
    default=1,
    show_default=True,
    help="Number of complete cycles (0 for infinite)",
)
@click.option(
    "--twinkle-ratio",
    type=float,
    default=None,
    help="Ratio of periods to twinkle simultaneously (0.0 to 1.0) [default: 0.3]",
)
@click.option(
    "--min-twinkle-count",
    type=int,
    default=None,
    help="Minimum periods twinkling; replaces the default ratio unless --twinkle-ratio is given",
)
@click.option(
    "--max-twinkle-count",
    type=int,
    default=None,
    help="Maximum periods twinkling; with --min-twinkle-count the range wins over any ratio",
)
@click.option(
    "--twinkling-percentage",
    type=float,
    default=0.8,
    show_default=True,
    help="Percentage of time twinkling should be active (0.0 to 1.0)",
)
@click.option("--star-mode", is_flag=True, help="Use star characters instead of dots")
@click.option("--seed", type=int, default=None, help="Seed for reproducible twinkling")
@click.pass_obj
def twinkle(
    state: CliState | None,
    base_color: tuple[int, int, int],
    twinkle_color: tuple[int, int, int],
    speed: int,
    easing: str,
    duration: int,
    cycles: int,
    twinkle_ratio: float | None,
    min_twinkle_count: int | None,
    max_twinkle_count: int | None,
    twinkling_percentage: float,
    star_mode: bool,
    seed: int | None,
) -> None:
    """Apply twinkle effect to stdin (animates periods with twinkling stars)."""
    state = state or CliState()
    # An explicit count takes over from the default ratio.
    if twinkle_ratio is None and min_twinkle_count is None and max_twinkle_count is None:
        twinkle_ratio = DEFAULT_TWINKLE_RATIO

    config = build_config(
        TwinkleConfig,
        base_color=base_color,
        twinkle_color=twinkle_color,
        speed=speed,
        easing=easing,
        duration=duration,
        cycles=cycles,
        twinkle_ratio=clamp_unit(twinkle_ratio) if twinkle_ratio is not None else None,
        min_twinkle_count=min_twinkle_count,
        max_twinkle_count=max_twinkle_count,
        twinkling_percentage=clamp_unit(twinkling_percentage),
        star_mode=star_mode,
    )

    rng = random.Random(seed)
    lines = read_input_lines()
    presenter = Presenter()
    with terminal_errors():
        offsets = state.prepare(lines, presenter)
        for index, line in enumerate(lines):
            origin = offsets.for_line(index) if offsets else None
            run_twinkle(line, config, presenter=presenter, origin=origin, rng=rng)
