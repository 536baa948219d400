"""
Project selection models.

A Projects value says which directory, if any, each project slot runs in
for the current invocation.
"""

from __future__ import annotations

from enum import Enum

from .base import ImmutableModel


class ProjectSlot(str, Enum):
    """The two fixed project roles, in dispatch order."""

    APP = "app"
    CLIENT = "client"

    @property
    def default_directory(self) -> str:
        """Directory name used when the configuration gives no override."""
        return self.value


class Projects(ImmutableModel):
    """Resolved project directories; None means the slot is inactive."""

    app: str | None = None
    client: str | None = None

    def get(self, slot: ProjectSlot) -> str | None:
        return self.app if slot is ProjectSlot.APP else self.client

    def active(self) -> list[tuple[ProjectSlot, str]]:
        """Return (slot, directory) pairs for active slots, app first."""
        pairs = []
        for slot in ProjectSlot:
            directory = self.get(slot)
            if directory is not None:
                pairs.append((slot, directory))
        return pairs

    @property
    def is_empty(self) -> bool:
        return self.app is None and self.client is None
