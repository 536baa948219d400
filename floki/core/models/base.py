"""
Base Pydantic models for floki.

Strict bases for the values floki passes between components: resolved
Projects and ExitOutcome build on ImmutableModel, while the lax
ConfigBaseModel for floki.toml sections lives in config.py.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FlokiBaseModel(BaseModel):
    """Strict base for floki value models.

    Configuration:
        - strict: Strict type coercion (no implicit conversions)
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - use_enum_values: Serialize enums as values
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class ImmutableModel(FlokiBaseModel):
    """Frozen base for resolved values such as Projects and ExitOutcome."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )
