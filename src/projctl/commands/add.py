"""Command: add one project."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from projctl.commands._base import ProjCommand

if TYPE_CHECKING:
    from projctl.commands._context import AppContext

_ADD_EXAMPLES = """\
  projctl add "Launch website" --people 3
  projctl add "Quarterly report" --people 2 --description "Numbers for Q3"
  projctl --json add "Hiring plan" -p 5"""


@click.command(cls=ProjCommand, examples=_ADD_EXAMPLES)
@click.argument("title")
@click.option("-p", "--people", required=True, help="Number of people (1-5 by default).")
@click.option("-d", "--description", default=None, help="Optional description.")
@click.pass_obj
def add(app: AppContext, title: str, people: str, description: str | None) -> None:
    """Validate input and add a project."""
    app.connect_plugins()
    app.emit(app.project_service().create_project(title, people, description))
