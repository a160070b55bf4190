"""``clifx shine2d``: sweep an angled highlight line across the whole input block."""

from __future__ import annotations

from typing import Any

import click

from clifx.cli.options import (
    CliState,
    build_config,
    clamp_unit,
    read_input_lines,
    sweep_options,
    terminal_errors,
)
from clifx.colors import random_saturated_color
from clifx.config import Shine2DConfig
from clifx.effects.shine2d import run_shine2d
from clifx.presenter import Presenter


@click.command()
@sweep_options(speed=50, width=3, shine_color="255,255,0")
@click.option(
    "--angle",
    type=float,
    default=90.0,
    show_default=True,
    help="Angle of the shine line in degrees (0=horizontal, 90=vertical, 45=diagonal)",
)
@click.option(
    "--terminal-width",
    type=int,
    default=None,
    help="Terminal width for word wrapping (auto-detected if not specified)",
)
@click.pass_obj
def shine2d(state: CliState | None, color: tuple[int, int, int] | None, **options: Any) -> None:
    """Apply 2D shine effect to stdin with angle control and word wrapping."""
    state = state or CliState()
    config = build_config(
        Shine2DConfig,
        base_color=color or random_saturated_color(),
        **{
            **options,
            "pause_position": clamp_unit(options["pause_position"]),
            "opacity": clamp_unit(options["opacity"]),
        },
    )

    lines = read_input_lines()
    presenter = Presenter()
    with terminal_errors():
        offsets = state.prepare(lines, presenter)
        origin = offsets.for_line(0) if offsets else None
        run_shine2d("\n".join(lines), config, presenter=presenter, origin=origin)
