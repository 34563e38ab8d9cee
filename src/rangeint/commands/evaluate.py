"""Command: apply one operator to two bounded values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rangeint.commands._base import RangeCommand

if TYPE_CHECKING:
    from rangeint.commands._context import AppContext


@click.command(
    "eval",
    cls=RangeCommand,
    examples="""\
  rangeint eval 2 + 4
  rangeint eval 4 divide 2
  rangeint --json eval 3 '^' 2
  rangeint eval 10 + 1      # aborts: result out of bounds""",
)
@click.argument("lhs", type=int)
@click.argument("operator")
@click.argument("rhs", type=int)
@click.pass_obj
def evaluate(app: AppContext, lhs: int, operator: str, rhs: int) -> None:
    """Compute LHS OPERATOR RHS.

    OPERATOR is a name (add, subtract, multiply, divide, bitwise_and,
    bitwise_or, bitwise_xor) or a symbol (+ - * / & | ^). A result
    outside [1, 10] aborts the process.
    """
    app.emit(app.service.evaluate(lhs, operator, rhs))
