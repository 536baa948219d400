"""
Pydantic models for floki.

This package provides typed, validated models for configuration,
project selection and build tool outcomes.
"""

from .base import FlokiBaseModel, ImmutableModel
from .command import DispatchResult, ExitOutcome, ProjectOutcome, Subcommand
from .config import FlokiConfig, FlokiSection
from .projects import Projects, ProjectSlot

__all__ = [
    "DispatchResult",
    "ExitOutcome",
    "FlokiBaseModel",
    "FlokiConfig",
    "FlokiSection",
    "ImmutableModel",
    "ProjectOutcome",
    "ProjectSlot",
    "Projects",
    "Subcommand",
]
