"""XDG-compliant path helpers for clifx configuration."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir


def get_config_dir() -> Path:
    """Get the config directory for clifx (config.toml)."""
    override = os.environ.get("CLIFX_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir("clifx"))


def get_config_path() -> Path:
    """Get the path to the defaults file."""
    return get_config_dir() / "config.toml"
