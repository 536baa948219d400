"""Build tool execution."""

from .runner import CargoRunner

__all__ = ["CargoRunner"]
