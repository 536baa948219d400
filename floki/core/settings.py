"""
Pydantic Settings for floki's runtime behaviour.

These are process-level knobs read from the environment, separate from the
per-repository floki.toml.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FlokiSettings(BaseSettings):
    """Runtime settings with environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (FLOKI_CARGO, then CARGO as exported by cargo
       to its subcommands; FLOKI_COLOR)
    3. Model defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="FLOKI_",
        extra="ignore",
        populate_by_name=True,
    )

    cargo: str = Field(
        default="cargo",
        validation_alias=AliasChoices("FLOKI_CARGO", "CARGO"),
        description="Build tool executable",
    )
    color: bool = Field(default=True, description="Use ANSI colors on a terminal")


def load_settings(**overrides) -> FlokiSettings:
    """Load floki settings from the environment, applying explicit overrides."""
    return FlokiSettings(**overrides)
