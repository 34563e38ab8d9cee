"""Command: validate a raw integer against the bound."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rangeint.commands._base import RangeCommand

if TYPE_CHECKING:
    from rangeint.commands._context import AppContext


@click.command(
    cls=RangeCommand,
    examples="""\
  rangeint construct 7
  rangeint --json construct 11""",
)
@click.argument("raw", type=int)
@click.pass_obj
def construct(app: AppContext, raw: int) -> None:
    """Check that RAW lies in [1, 10]."""
    app.emit(app.service.construct(raw))
