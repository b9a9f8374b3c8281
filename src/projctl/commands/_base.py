"""Base Click command for projctl subcommands.

``ProjCommand`` adds two things every subcommand can opt into:

* ``examples=`` exposes an eager ``--examples`` flag that prints usage and
  exits, so ``--help`` stays short.
* ``needs_prompts=True`` refuses to run when the invocation cannot prompt
  (``--no-interact`` or ``--json``) and reports ``NOT_INTERACTIVE`` through
  the normal ServiceResult output instead.
"""

from __future__ import annotations

from typing import Any

import click

from projctl.services.result import ServiceResult


def _print_examples(examples: str) -> click.Option:
    def callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=callback,
        help="Show usage examples.",
    )


class ProjCommand(click.Command):
    """A projctl subcommand with optional ``--examples`` and a prompt guard."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        needs_prompts: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.needs_prompts = needs_prompts
        if examples:
            self.params.append(_print_examples(examples))

    def invoke(self, ctx: click.Context) -> Any:
        app = ctx.find_root().obj
        if self.needs_prompts and app is not None and not app.interactive:
            app.emit(
                ServiceResult.failure(
                    self.name or "command",
                    "NOT_INTERACTIVE",
                    f"{self.name} needs prompts; drop --no-interact/--json",
                )
            )
        return super().invoke(ctx)
