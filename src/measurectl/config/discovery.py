"""Locate measurectl.toml.

Resolution order: ``--config`` flag, ``MEASURECTL_CONFIG`` env var, then a
walk up from the start directory the way git finds ``.git/``. An explicit
path that does not exist yields no config rather than falling through.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

CONFIG_FILENAME = "measurectl.toml"
CONFIG_ENV_VAR = "MEASURECTL_CONFIG"

logger = logging.getLogger(__name__)


def _existing(path: str | Path, source: str) -> Path | None:
    p = Path(path)
    if p.is_file():
        return p
    logger.debug("Config from %s not found: %s", source, p)
    return None


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for measurectl.toml.

    ``MEASURECTL_CONFIG`` takes precedence over the walk.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return _existing(env_path, CONFIG_ENV_VAR)

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def locate_config(config_path: str | None = None, start: Path | None = None) -> Path | None:
    """Return the config file for a CLI invocation, or None."""
    if config_path:
        return _existing(config_path, "--config")
    return find_config(start)
