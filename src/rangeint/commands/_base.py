"""Click base classes with an ``--examples`` flag.

``rangeint <command> --examples`` prints that command's examples.
``rangeint --examples`` prints the examples of every registered command.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click


def _examples_option(render: Callable[[click.Context], str]) -> click.Option:
    """Build an eager ``--examples`` flag whose text comes from ``render(ctx)``."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(render(ctx))
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples.",
    )


class RangeCommand(click.Command):
    """Click Command that accepts an ``examples`` block."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                _examples_option(lambda ctx: f"Examples for '{ctx.command_path}':\n\n{examples}")
            )


class RangeGroup(click.Group):
    """Click Group whose ``--examples`` gathers the examples of its commands."""

    command_class = RangeCommand

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.params.append(_examples_option(self._collect_examples))

    def _collect_examples(self, ctx: click.Context) -> str:
        blocks: list[str] = []
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            examples = getattr(cmd, "examples", None)
            if examples:
                blocks.append(f"{name}:\n{examples}")
        return "\n\n".join(blocks)
