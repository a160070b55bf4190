"""Effect configuration models and the optional user defaults file."""

from __future__ import annotations

import tomllib
from enum import StrEnum
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from clifx.colors import format_rgb, parse_rgb
from clifx.easing import EasingKind
from clifx.paths import get_config_path

if TYPE_CHECKING:
    from pathlib import Path

Channel = Annotated[int, Field(ge=0, le=255)]
Color = tuple[Channel, Channel, Channel]
Unit = Annotated[float, Field(ge=0.0, le=1.0)]
Millis = Annotated[int, Field(ge=0)]


class SweepStart(StrEnum):
    """Side of the text the sweep starts from."""

    BEGINNING = "beginning"
    END = "end"


def _coerce_color(value: object) -> object:
    if isinstance(value, str):
        return parse_rgb(value)
    return value


class CycleConfig(BaseModel):
    """Timing shared by every effect: frame interval, cycle length, cycle count, delays."""

    model_config = ConfigDict(frozen=True)

    base_color: Color = (255, 255, 255)
    speed: int = Field(default=100, gt=0, description="Milliseconds between frames")
    duration: Millis = Field(default=2000, description="Milliseconds per cycle")
    cycles: int = Field(default=1, ge=0, description="Number of cycles (0 = unbounded)")
    easing: EasingKind = EasingKind.LINEAR
    pause_length: Millis | None = Field(default=None, description="Pause at position (ms)")
    pause_position: Unit = Field(default=0.5, description="Fraction of travel to pause at")
    cycle_pre_delay: Millis | None = None
    cycle_post_delay: Millis | None = None
    cycle_switchback_delay: Millis | None = None

    @field_validator("base_color", mode="before")
    @classmethod
    def parse_base_color(cls, value: object) -> object:
        return _coerce_color(value)

    @property
    def total_frames(self) -> int:
        return max(1, self.duration // self.speed)


class SweepConfig(CycleConfig):
    """Configuration for the moving highlight band."""

    shine_color: Color = (255, 255, 255)
    start: SweepStart = SweepStart.BEGINNING
    width: int = Field(default=2, ge=1, description="Sweep radius in characters")
    blur: bool = Field(default=True, description="Linear falloff instead of a hard edge")
    padding: int = Field(default=5, ge=0, description="Travel past each edge of the text")
    opacity: Unit = 1.0

    @field_validator("shine_color", mode="before")
    @classmethod
    def parse_shine_color(cls, value: object) -> object:
        return _coerce_color(value)


class ShineConfig(SweepConfig):
    """One-dimensional sweep over a single line."""


class Shine2DConfig(SweepConfig):
    """Angled sweep over a wrapped block of text."""

    speed: int = Field(default=50, gt=0, description="Milliseconds between frames")
    width: int = Field(default=3, ge=1, description="Sweep half-width in cells")
    shine_color: Color = (255, 255, 0)
    angle: float = Field(default=90.0, description="0 = horizontal line, 90 = vertical line")
    terminal_width: int | None = Field(default=None, ge=1, description="Wrap width override")


class TwinkleConfig(CycleConfig):
    """Stochastic twinkling of period characters."""

    duration: Millis = Field(default=3000, description="Milliseconds per cycle")
    twinkle_color: Color = (255, 255, 0)
    twinkle_ratio: Unit | None = 0.3
    min_twinkle_count: int | None = Field(default=None, ge=0)
    max_twinkle_count: int | None = Field(default=None, ge=0)
    twinkling_percentage: Unit = 0.8
    star_mode: bool = False

    @field_validator("twinkle_color", mode="before")
    @classmethod
    def parse_twinkle_color(cls, value: object) -> object:
        return _coerce_color(value)

    @model_validator(mode="after")
    def check_count_range(self) -> TwinkleConfig:
        low, high = self.min_twinkle_count, self.max_twinkle_count
        if low is not None and high is not None and low > high:
            raise ValueError(
                f"min_twinkle_count ({low}) must not exceed max_twinkle_count ({high})"
            )
        return self


EFFECT_NAMES = ("shine", "shine2d", "twinkle")


class ClifxConfig(BaseModel):
    """User defaults file: one table of option defaults per effect."""

    model_config = ConfigDict(extra="forbid")

    shine: dict[str, Any] = Field(default_factory=dict)
    shine2d: dict[str, Any] = Field(default_factory=dict)
    twinkle: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def load(cls, config_path: Path | None = None) -> ClifxConfig:
        """Load defaults from TOML, or return empty defaults when the file is missing."""
        if config_path is None:
            config_path = get_config_path()

        if config_path.exists():
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)

        return cls()

    def default_map(self) -> dict[str, dict[str, Any]]:
        """Build a click ``default_map`` keyed by subcommand name."""
        defaults: dict[str, dict[str, Any]] = {}
        for name in EFFECT_NAMES:
            table = getattr(self, name)
            if not table:
                continue
            defaults[name] = {
                key.replace("-", "_"): _option_value(value) for key, value in table.items()
            }
        return defaults


def _option_value(value: Any) -> Any:
    # Colors may be written as [r, g, b] arrays in TOML.
    if isinstance(value, list) and len(value) == 3 and all(isinstance(v, int) for v in value):
        return format_rgb((value[0], value[1], value[2]))
    return value
