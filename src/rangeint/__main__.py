"""Allow ``python -m rangeint``."""

from rangeint.cli import cli

cli()
