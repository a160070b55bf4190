"""``clifx shine``: sweep a highlight across each input line."""

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
from clifx.config import ShineConfig
from clifx.effects.shine import run_shine
from clifx.presenter import Presenter


@click.command()
@sweep_options(speed=100, width=2, shine_color="255,255,255")
@click.pass_obj
def shine(state: CliState | None, color: tuple[int, int, int] | None, **options: Any) -> None:
    """Apply shine effect to stdin."""
    state = state or CliState()
    config = build_config(
        ShineConfig,
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
        for index, line in enumerate(lines):
            origin = offsets.for_line(index) if offsets else None
            run_shine(line, config, presenter=presenter, origin=origin)
