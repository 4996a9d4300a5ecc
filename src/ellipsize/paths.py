"""XDG-compliant path helpers for Ellipsize configuration."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir


def get_config_dir() -> Path:
    """Get the config directory for Ellipsize (config.toml)."""
    override = os.environ.get("ELLIPSIZE_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir("ellipsize"))


def get_config_path() -> Path:
    """Get the path to the main config file."""
    return get_config_dir() / "config.toml"
