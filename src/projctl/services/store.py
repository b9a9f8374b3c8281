"""ProjectStore — the single shared, append-only project collection.

Holds the ordered records and the registered listeners. ``add_project``
appends, then notifies every listener in registration order with its own
copy of the full sequence. Both steps run synchronously, so no caller can
observe the store between them.

INVARIANT: Records are never edited or removed once appended.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from projctl.domain.projects import ProjectRecord, build_project

logger = logging.getLogger(__name__)

Listener = Callable[[list[ProjectRecord]], None]


class ProjectStore:
    """Ordered project collection with change listeners.

    Obtain the process-wide instance with :func:`get_store` and pass it
    to consumers explicitly.

    A listener that raises stops the current notification pass and the
    exception reaches the ``add_project`` caller. The record is already
    appended by then, so the sequence stays consistent.
    """

    def __init__(self) -> None:
        self._projects: list[ProjectRecord] = []
        self._listeners: list[Listener] = []

    def __len__(self) -> int:
        return len(self._projects)

    @property
    def projects(self) -> list[ProjectRecord]:
        """A snapshot copy of the records, in insertion order."""
        return self._projects.copy()

    def add_listener(self, listener: Listener) -> None:
        """Register *listener*. Duplicates are kept and called once each."""
        self._listeners.append(listener)
        logger.debug("Registered listener #%d", len(self._listeners))

    def add_project(
        self,
        title: str,
        people: int,
        description: str | None = None,
    ) -> ProjectRecord:
        """Build a record, append it, and notify every listener."""
        project = build_project(title, people, description)
        self._projects.append(project)
        logger.debug("Added project %s (%d total)", project.id, len(self._projects))

        for listener in self._listeners:
            listener(self._projects.copy())
        return project


_store: ProjectStore | None = None


def get_store() -> ProjectStore:
    """Return the process-wide store, creating it on first call."""
    global _store
    if _store is None:
        _store = ProjectStore()
    return _store
