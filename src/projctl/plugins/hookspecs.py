"""Pluggy hook specifications for projctl change events."""

from __future__ import annotations

from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("projctl")
hookimpl = pluggy.HookimplMarker("projctl")


class ProjctlHookSpec:
    """Hook specifications for the projctl plugin system."""

    @hookspec
    def post_add_project(
        self,
        project: dict[str, Any],
        projects: list[dict[str, Any]],
    ) -> None:
        """Called after a project is added, with the full ordered snapshot."""

    @hookspec
    def post_batch(self, added: int, failed: int) -> None:
        """Called after a batch import finishes."""
