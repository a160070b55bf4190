"""Unit tests for version reporting."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

import clifx
from clifx.cli.commands.root import cli
from clifx.version import get_clifx_version

pytestmark = pytest.mark.unit


def test_package_version_matches_metadata() -> None:
    assert clifx.__version__ == get_clifx_version()


def test_version_flag_reports_same_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.output.strip() == f"clifx {clifx.__version__}"
