"""
Configuration models.

Mirror the layout of floki.toml:

    [floki]
    main_service = "backend"
    client_service = "frontend"
"""

from __future__ import annotations

from pydantic import ConfigDict

from .base import FlokiBaseModel


class ConfigBaseModel(FlokiBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        revalidate_instances="never",
    )


class FlokiSection(ConfigBaseModel):
    """The [floki] table: directory overrides for each project slot."""

    main_service: str | None = None
    client_service: str | None = None


class FlokiConfig(ConfigBaseModel):
    """Root of floki.toml. The [floki] table is required."""

    floki: FlokiSection

    @classmethod
    def empty(cls) -> FlokiConfig:
        """Configuration with no overrides at all."""
        return cls(floki=FlokiSection())
