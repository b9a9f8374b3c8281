"""Command: check one value against constraint rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from projctl.commands._base import ProjCommand
from projctl.domain.validation import Constraint, NumberValue, TextValue
from projctl.services.check import check_value

if TYPE_CHECKING:
    from projctl.commands._context import AppContext

_CHECK_EXAMPLES = """\
  projctl check "My project" --required --max-length 40
  projctl check "short" --min-length 5
  projctl check 3 --number --min 1 --max 5"""


def _parse_number(raw: str) -> int | float:
    try:
        return int(raw)
    except ValueError:
        try:
            return float(raw)
        except ValueError:
            raise click.BadParameter(f"{raw!r} is not a number", param_hint="VALUE") from None


@click.command(cls=ProjCommand, examples=_CHECK_EXAMPLES)
@click.argument("value")
@click.option("--number", "as_number", is_flag=True, help="Treat VALUE as a number.")
@click.option("--required", is_flag=True, help="Value must not be blank.")
@click.option("--min-length", type=int, default=None, help="Minimum trimmed length (text).")
@click.option("--max-length", type=int, default=None, help="Maximum trimmed length (text).")
@click.option("--min", "min_", type=float, default=None, help="Inclusive minimum (number).")
@click.option("--max", "max_", type=float, default=None, help="Inclusive maximum (number).")
@click.pass_obj
def check(
    app: AppContext,
    value: str,
    as_number: bool,
    required: bool,
    min_length: int | None,
    max_length: int | None,
    min_: float | None,
    max_: float | None,
) -> None:
    """Check VALUE against the given rules. Exits 1 when a rule fails.

    Length rules only apply to text and range rules only to numbers;
    a rule for the other kind is ignored.
    """
    scalar = NumberValue(number=_parse_number(value)) if as_number else TextValue(text=value)
    constraint = Constraint(
        value=scalar,
        required=required,
        min_length=min_length,
        max_length=max_length,
        min=min_,
        max=max_,
    )
    app.emit(check_value(constraint))
