"""ProjectRecord entity and its factory.

INVARIANT: A record's ``id`` and ``title`` never change after construction.
The factory performs no validation; callers check input with
:func:`projctl.domain.validation.validate` first.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

from projctl.domain.ids import generate_project_id
from projctl.domain.types import ProjectStatus


class ProjectRecord(BaseModel):
    """One tracked project.

    Frozen, so a snapshot handed to a listener can never be used to
    change what the store holds.
    """

    model_config = {"frozen": True}

    id: str
    title: str
    description: str = ""
    people: int
    completed: bool = False

    @property
    def status(self) -> ProjectStatus:
        return ProjectStatus.FINISHED if self.completed else ProjectStatus.ACTIVE

    def to_dict(self) -> dict[str, Any]:
        """Public snapshot shape: id, title, description, people, completed."""
        return self.model_dump()


def build_project(title: str, people: int, description: str | None = None) -> ProjectRecord:
    """Create a new record with a fresh ID, ``completed=False``.

    *description* defaults to empty text when absent or empty.
    """
    return ProjectRecord(
        id=generate_project_id(),
        title=title,
        description=description or "",
        people=people,
        completed=False,
    )


def filter_by_status(
    records: Iterable[ProjectRecord],
    status: ProjectStatus,
) -> list[ProjectRecord]:
    """Return the records in *status*, preserving order."""
    return [r for r in records if r.status == status]
