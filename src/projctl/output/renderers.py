"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from projctl.domain.types import ProjectStatus
from projctl.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from projctl.domain.projects import ProjectRecord
    from projctl.services.result import ServiceResult

LIST_HEADINGS: dict[ProjectStatus, str] = {
    ProjectStatus.ACTIVE: "Active projects",
    ProjectStatus.FINISHED: "Finished projects",
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: IDs only where possible."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items") or result.data.get("created")
    if items and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if isinstance(item, dict) and "id" in item)
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


def render_project_lists(projects: Iterable[ProjectRecord | dict[str, Any]]) -> str:
    """Render the active and finished lists, one table each."""
    console = create_console()
    items = [p if isinstance(p, dict) else p.to_dict() for p in projects]
    for status in (ProjectStatus.ACTIVE, ProjectStatus.FINISHED):
        wanted = status == ProjectStatus.FINISHED
        _project_table(
            console,
            LIST_HEADINGS[status],
            [item for item in items if bool(item.get("completed")) is wanted],
            status,
        )
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="proj.ok")
    op = Text(f"  {result.op}", style="proj.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="proj.key")
    if key == "id":
        v = Text(str(value), style="proj.id")
    elif key == "title":
        v = Text(str(value), style="proj.title")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _project_table(
    console: Console,
    heading: str,
    items: list[dict[str, Any]],
    status: ProjectStatus,
) -> None:
    console.print(Text(heading.upper(), style=style_for_status(status)))
    if not items:
        console.print(Text("  (none)", style="dim"))
        return
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="proj.id", no_wrap=True)
    table.add_column("Title", style="proj.title")
    table.add_column("People", justify="right")
    table.add_column("Description")
    for item in items:
        table.add_row(
            str(item.get("id", "")),
            str(item.get("title", "")),
            str(item.get("people", "")),
            str(item.get("description", "")),
        )
    console.print(table)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="proj.error")
    op = Text(f"  {result.op}", style="proj.op")
    console.print(label, op, Text(" — "), msg, sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_project(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("id", "title", "description", "people", "completed"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_batch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    created = result.data.get("created", [])
    _field(console, "added", len(created))
    errors = result.data.get("errors", [])
    if errors:
        _field(console, "failed", len(errors))
    for item in created:
        console.print(
            Text(f"  + {item.get('id', '')}", style="proj.id"),
            Text(f"  {item.get('title', '')}"),
            sep="",
        )


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    _field(console, "count", len(items))
    if items:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("ID", style="proj.id", no_wrap=True)
        table.add_column("Title", style="proj.title")
        table.add_column("People", justify="right")
        table.add_column("Status")
        for item in items:
            status = "finished" if item.get("completed") else "active"
            table.add_row(
                str(item.get("id", "")),
                str(item.get("title", "")),
                str(item.get("people", "")),
                Text(status, style=style_for_status(status)),
            )
        console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for k, v in result.meta.items():
            console.print(f"    {k}: {v}")


_OP_RENDERERS: dict[str, Any] = {
    "create_project": _render_project,
    "create_batch": _render_batch,
    "list_projects": _render_list,
}
