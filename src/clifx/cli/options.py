"""Shared click options, parameter types and helpers for the effect commands."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import click
from pydantic import BaseModel, ValidationError

from clifx.center import CenteringOffsets, calculate_centering_offsets
from clifx.colors import parse_rgb
from clifx.config import SweepStart
from clifx.easing import EasingKind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from clifx.presenter import Presenter

EASING_CHOICES = tuple(kind.value for kind in EasingKind)
START_CHOICES = tuple(start.value for start in SweepStart)


class RGBColor(click.ParamType):
    """Click parameter accepting ``r,g,b`` with each channel in 0-255."""

    name = "r,g,b"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None):
        if isinstance(value, tuple):
            return value
        try:
            return parse_rgb(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


RGB_COLOR = RGBColor()


def clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(slots=True)
class CliState:
    """Options of the root group handed down to every effect command."""

    center: bool = False

    def prepare(self, lines: list[str], presenter: Presenter) -> CenteringOffsets | None:
        """Clear the screen and compute the draw origin when centering is on."""
        if not self.center:
            return None
        offsets = calculate_centering_offsets(lines)
        presenter.clear_screen()
        return offsets


def read_input_lines() -> list[str]:
    """Read stdin to completion and split it into lines without terminators."""
    stream = click.get_text_stream("stdin")
    return [line.removesuffix("\n").removesuffix("\r") for line in stream]


def build_config[M: BaseModel](model: type[M], **fields: Any) -> M:
    """Validate effect options, turning model errors into a usage error."""
    try:
        return model(**fields)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'config'}: {error['msg']}"
            for error in exc.errors()
        )
        raise click.UsageError(f"Invalid configuration: {details}") from exc


@contextmanager
def terminal_errors() -> Iterator[None]:
    """Map interrupts and output failures to exit codes."""
    try:
        yield
    except KeyboardInterrupt:
        sys.exit(130)
    except OSError as exc:
        raise click.ClickException(f"Output failed: {exc}") from exc


def sweep_options(*, speed: int, width: int, shine_color: str) -> Callable[[Callable], Callable]:
    """Options shared by ``shine`` and ``shine2d``; defaults differ per command."""
    options = [
        click.option(
            "--color",
            type=RGB_COLOR,
            default=None,
            help='Base color as RGB values (e.g., "255,255,0"); random when omitted',
        ),
        click.option(
            "--speed",
            type=int,
            default=speed,
            show_default=True,
            help="Animation speed in milliseconds between frames",
        ),
        click.option(
            "--easing",
            type=click.Choice(EASING_CHOICES, case_sensitive=False),
            default=EasingKind.LINEAR.value,
            show_default=True,
            help="Easing function for the shine animation",
        ),
        click.option(
            "--duration",
            type=int,
            default=2000,
            show_default=True,
            help="Duration of one complete cycle in milliseconds",
        ),
        click.option(
            "--cycles",
            type=int,
            default=1,
            show_default=True,
            help="Number of complete back-and-forth cycles (0 for infinite)",
        ),
        click.option(
            "--start",
            type=click.Choice(START_CHOICES, case_sensitive=False),
            default=SweepStart.BEGINNING.value,
            show_default=True,
            help="Starting direction of the shine effect",
        ),
        click.option(
            "--width",
            type=int,
            default=width,
            show_default=True,
            help="Width of the shine effect in characters",
        ),
        click.option(
            "--blur/--no-blur",
            default=True,
            show_default=True,
            help="Gradual highlighting instead of a hard edge",
        ),
        click.option(
            "--padding",
            type=int,
            default=5,
            show_default=True,
            help="Padding to extend shine position past text boundaries",
        ),
        click.option(
            "--shine-color",
            type=RGB_COLOR,
            default=shine_color,
            show_default=True,
            help="Shine color as RGB values",
        ),
        click.option(
            "--pause-length",
            type=int,
            default=None,
            help="Length of pause in milliseconds (disabled if not specified)",
        ),
        click.option(
            "--pause-position",
            type=float,
            default=0.5,
            show_default=True,
            help="Position where shine pauses (0.0 to 1.0, where 0.5 is center)",
        ),
        click.option(
            "--cycle-pre-delay",
            type=int,
            default=None,
            help="Delay before each cycle starts in milliseconds",
        ),
        click.option(
            "--cycle-post-delay",
            type=int,
            default=None,
            help="Delay after each cycle completes in milliseconds",
        ),
        click.option(
            "--cycle-switchback-delay",
            type=int,
            default=None,
            help="Delay when the shine changes direction in milliseconds",
        ),
        click.option(
            "--opacity",
            type=float,
            default=1.0,
            show_default=True,
            help="Opacity of the shine effect (0.0 to 1.0)",
        ),
    ]

    def decorator(func: Callable) -> Callable:
        for option in reversed(options):
            func = option(func)
        return func

    return decorator
