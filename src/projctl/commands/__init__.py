"""Subcommand modules for projctl.

Provides register_commands() which uses deferred imports to keep
``projctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from projctl.commands.add import add
    from projctl.commands.batch import batch
    from projctl.commands.check import check
    from projctl.commands.session import session

    cli.add_command(add)
    cli.add_command(batch)
    cli.add_command(check)
    cli.add_command(session)
