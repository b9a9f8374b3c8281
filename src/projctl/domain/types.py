"""Project classification enums."""

from __future__ import annotations

from enum import StrEnum


class ProjectStatus(StrEnum):
    """Which list a project belongs to."""

    ACTIVE = "active"
    FINISHED = "finished"
