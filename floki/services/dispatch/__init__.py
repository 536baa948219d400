"""Dispatching build tool subcommands across projects."""

from .dispatcher import RELEASE_FLAG, CommandDispatcher

__all__ = ["RELEASE_FLAG", "CommandDispatcher"]
