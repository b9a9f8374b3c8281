"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, projctl.toml only contains
overrides. An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- projctl.toml sections ---


class FormConfig(BaseModel):
    """[form] section — constraints applied to new-project input."""

    model_config = {"frozen": True}

    title_max_length: int | None = None
    description_min_length: int = 5
    people_min: int = 1
    people_max: int = 5


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".projctl/plugins"

