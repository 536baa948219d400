"""
Service implementations for floki.

- config_resolver: floki.toml loading and project resolution
- dispatch: running a subcommand across projects
- execution: subprocess build tool runner
- filesystem / logging: local adapters for the core interfaces
"""

from .config_resolver import DEFAULT_CONFIG_FILE, DEFAULT_CONFIG_TEMPLATE, ConfigResolver
from .dispatch import CommandDispatcher
from .execution import CargoRunner
from .filesystem import LocalFileSystem
from .logging import FlokiLogger, NullLogger

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_CONFIG_TEMPLATE",
    "CargoRunner",
    "CommandDispatcher",
    "ConfigResolver",
    "FlokiLogger",
    "LocalFileSystem",
    "NullLogger",
]
