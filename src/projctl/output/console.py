"""Rich Console factory and theme for projctl output.

Creates Console instances that render to a StringIO buffer so renderers
return plain strings. In non-TTY environments (tests, pipes) Rich
disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PROJ_THEME = Theme(
    {
        "proj.ok": "bold green",
        "proj.error": "bold red",
        "proj.warning": "bold yellow",
        "proj.op": "bold cyan",
        "proj.key": "dim",
        "proj.id": "bold blue",
        "proj.title": "bold",
        "proj.status.active": "yellow",
        "proj.status.finished": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PROJ_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for a project status."""
    return f"proj.status.{status}" if status in ("active", "finished") else ""
