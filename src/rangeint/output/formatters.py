"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, colors) or
machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from rangeint.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from rangeint.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags taken from the CLI settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    no_color: bool = False


def _render_data(console: Console, data: dict[str, Any]) -> None:
    """Render result data as indented key-value pairs."""
    for key, value in data.items():
        if key == "results" and isinstance(value, list):
            for row in value:
                console.print(
                    f"  [ri.expr]{escape(str(row['expression']))}[/] = "
                    f"[ri.value]{row['value']}[/]"
                )
        elif isinstance(value, (dict, list)):
            rendered = escape(_json.dumps(value, separators=(",", ":")))
            console.print(f"  [ri.key]{key}:[/] {rendered}")
        else:
            console.print(f"  [ri.key]{key}:[/] {escape(str(value))}")


def _format_quiet(result: ServiceResult) -> str:
    """Bare values only: one per line."""
    if not result.ok:
        return result.error.message if result.error else "Unknown error"
    if "results" in result.data:
        return "\n".join(str(row["value"]) for row in result.data["results"])
    return str(result.data.get("value", ""))


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; defaults to human-readable text.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _format_quiet(result)

    console = create_console(no_color=settings.no_color)
    if result.ok:
        console.print(f"[ri.ok]OK:[/] [ri.op]{result.op}[/]")
        if result.data:
            _render_data(console, result.data)
    else:
        error_msg = result.error.message if result.error else "Unknown error"
        console.print(f"[ri.error]ERROR:[/] [ri.op]{result.op}[/] - {escape(error_msg)}")
        if settings.verbose and result.error and result.error.detail:
            _render_data(console, result.error.detail)
    return get_output(console).rstrip("\n")
