"""Locate projctl.toml.

Lookup order: an explicit ``--config`` path, then the PROJCTL_CONFIG env
var, then a walk up from the start directory (like git finding .git/).
A path given explicitly that does not exist means "no config", never a
fallback to the walk-up.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "projctl.toml"
CONFIG_ENV_VAR = "PROJCTL_CONFIG"


def _existing(path: str) -> Path | None:
    p = Path(path)
    return p if p.is_file() else None


def find_config(start: Path | None = None, *, explicit: str | None = None) -> Path | None:
    """Return the projctl.toml to load, or None if there is none."""
    if explicit:
        return _existing(explicit)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return _existing(env_path)

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
