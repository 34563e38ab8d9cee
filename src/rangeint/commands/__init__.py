"""Subcommand modules for rangeint.

Provides register_commands() which uses deferred imports to keep
``rangeint --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from rangeint.commands.construct import construct
    from rangeint.commands.demo import demo
    from rangeint.commands.evaluate import evaluate

    cli.add_command(construct)
    cli.add_command(evaluate)
    cli.add_command(demo)
