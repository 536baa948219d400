"""
Click command implementations for floki CLI.

Each module corresponds to one or more floki commands. Commands are
registered with the main CLI group via register_commands() in floki.cli.
"""

from .cargo import build, clean, doc, test, update
from .init import init
from .run import run

COMMANDS = [
    init,
    build,
    clean,
    test,
    update,
    run,
    doc,
]

__all__ = [
    "COMMANDS",
    "build",
    "clean",
    "doc",
    "init",
    "run",
    "test",
    "update",
]
