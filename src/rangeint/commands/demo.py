"""Command: run the reference computations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rangeint.commands._base import RangeCommand

if TYPE_CHECKING:
    from rangeint.commands._context import AppContext


@click.command(cls=RangeCommand, examples="  rangeint demo\n  rangeint --json demo")
@click.pass_obj
def demo(app: AppContext) -> None:
    """Show each operator on a pair of in-range values."""
    app.emit(app.service.demo())
