"""
Core infrastructure for floki.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interface definitions for injectable services
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    CommandNotImplementedError,
    ConfigFileError,
    ConfigParseError,
    DispatchError,
    ExternalToolError,
    FlokiException,
    FlokiExecutionError,
    FlokiIOError,
    FlokiParseError,
    ToolSpawnError,
)

__all__ = [
    "CommandNotImplementedError",
    "ConfigFileError",
    "ConfigParseError",
    "DispatchError",
    "ExternalToolError",
    "FlokiException",
    "FlokiExecutionError",
    "FlokiIOError",
    "FlokiParseError",
    "ServiceContainer",
    "ToolSpawnError",
    "bootstrap",
    "get_container",
    "reset",
]
