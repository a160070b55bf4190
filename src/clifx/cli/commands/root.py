"""Root CLI command registration."""

from __future__ import annotations

import logging
import sys
import tomllib
from pathlib import Path

import click
from pydantic import ValidationError

from clifx.cli.options import CliState
from clifx.config import ClifxConfig
from clifx.debug_log import LOG_LEVELS, setup_logging
from clifx.terminal import get_terminal_name, supports_truecolor
from clifx.version import get_clifx_version

from .shine import shine
from .shine2d import shine2d
from .twinkle import twinkle

log = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.option("--center", is_flag=True, help="Clear screen and center output in terminal")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Defaults file (TOML) with [shine], [shine2d] and [twinkle] tables",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log verbosity on stderr (env: CLIFX_LOG_LEVEL)",
)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(
    ctx: click.Context,
    center: bool,
    config_path: Path | None,
    log_level: str | None,
    version: bool,
) -> None:
    """CLI effects for text processing."""
    if version:
        click.echo(f"clifx {get_clifx_version()}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    setup_logging(log_level)

    try:
        file_config = ClifxConfig.load(config_path)
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as exc:
        raise click.UsageError(f"Could not load config file: {exc}") from exc
    ctx.default_map = file_config.default_map()

    if sys.stdout.isatty() and not supports_truecolor():
        log.warning("%s may not support truecolor; colors can look off", get_terminal_name())

    ctx.obj = CliState(center=center)


cli.add_command(shine)
cli.add_command(shine2d)
cli.add_command(twinkle)
