"""Command: add projects from a JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from projctl.commands._base import ProjCommand
from projctl.services.result import ServiceResult

if TYPE_CHECKING:
    from projctl.commands._context import AppContext

_BATCH_EXAMPLES = """\
  projctl batch projects.json
  projctl batch projects.json --partial

  projects.json:
    [{"title": "Launch website", "people": 3},
     {"title": "Audit", "people": 1, "description": "Yearly audit"}]"""


@click.command(cls=ProjCommand, examples=_BATCH_EXAMPLES)
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--partial", is_flag=True, help="Add valid items even if some fail.")
@click.pass_obj
def batch(app: AppContext, file: Path, partial: bool) -> None:
    """Add every project listed in a JSON array file."""
    try:
        items = json.loads(file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        app.emit(_invalid_batch(f"Invalid JSON in {file}: {exc}"))
        return
    if not isinstance(items, list):
        app.emit(_invalid_batch(f"{file} must contain a JSON array"))
        return

    bridge = app.connect_plugins()
    result = app.project_service().create_batch(items, partial=partial)
    if result.ok and bridge is not None and result.meta:
        bridge.dispatch_batch(result.meta["added"], result.meta["failed"])
    app.emit(result)

    if result.ok and not app.settings.json_output and not app.settings.quiet:
        from projctl.output.renderers import render_project_lists

        click.echo(render_project_lists(app.store.projects))


def _invalid_batch(message: str) -> ServiceResult:
    return ServiceResult.failure("create_batch", "INVALID_BATCH", message)
