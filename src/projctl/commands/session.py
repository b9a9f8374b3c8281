"""Command: interactive project entry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from projctl.commands._base import ProjCommand
from projctl.output.renderers import render_project_lists

if TYPE_CHECKING:
    from projctl.commands._context import AppContext
    from projctl.domain.projects import ProjectRecord

_SESSION_EXAMPLES = """\
  projctl session
  projctl -c team.toml session"""


@click.command(cls=ProjCommand, examples=_SESSION_EXAMPLES, needs_prompts=True)
@click.pass_obj
def session(app: AppContext) -> None:
    """Enter projects one by one; the lists redraw after each add.

    Leave the title blank to finish. Every field is checked against the
    [form] rules, so a blank or short description is rejected.
    """

    def redraw(projects: list[ProjectRecord]) -> None:
        click.echo(render_project_lists(projects))

    app.connect_plugins()
    app.store.add_listener(redraw)
    service = app.project_service()

    while True:
        title = click.prompt("Title (blank to finish)", default="", show_default=False)
        if not title.strip():
            break
        description = click.prompt("Description", default="", show_default=False)
        people = click.prompt("People", default="", show_default=False)

        result = service.create_project(title, people, description)
        if not result.ok:
            fields = result.error.detail.get("fields", []) if result.error else []
            click.echo(f"Invalid input: {', '.join(fields)}", err=True)

    app.emit(service.list_projects())
