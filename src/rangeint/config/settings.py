"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``RANGEINT_*`` prefix
  3. Code defaults

The bound itself is fixed in :mod:`rangeint.domain.bounds` and is not a setting.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class RangeintSettings(BaseSettings):
    """Output and logging settings for the rangeint CLI.

    Stored in ``click.Context.obj`` (via AppContext) at the CLI root level.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RANGEINT_",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only init kwargs and env vars; no dotenv or secrets files."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> RangeintSettings:
        """Construct settings from a CLI invocation.

        Flags left at their falsy default do not mask env vars, so
        ``RANGEINT_VERBOSE=1 rangeint demo`` still turns on verbose output.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        return cls(**overrides)
