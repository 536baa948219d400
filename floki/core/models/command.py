"""
Build tool command models.

Provides the subcommand enum and the outcome records produced while
dispatching a subcommand across projects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import computed_field

from .base import ImmutableModel
from .projects import ProjectSlot

if TYPE_CHECKING:
    from ..exceptions import FlokiException


class Subcommand(str, Enum):
    """Build tool subcommands floki can dispatch."""

    BUILD = "build"
    TEST = "test"
    CLEAN = "clean"
    UPDATE = "update"
    DOC = "doc"


class ExitOutcome(ImmutableModel):
    """Result of one blocking build tool invocation."""

    args: tuple[str, ...]
    cwd: str
    returncode: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class ProjectOutcome:
    """Outcome of running a subcommand for one project slot.

    Attributes:
        slot: Project slot that was attempted
        directory: Working directory the tool ran in
        subcommand: Subcommand attempted
        error: Wrapped failure, or None on success
    """

    slot: ProjectSlot
    directory: str
    subcommand: Subcommand
    error: FlokiException | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DispatchResult:
    """Ordered per-project outcomes of a single dispatch."""

    subcommand: Subcommand
    outcomes: tuple[ProjectOutcome, ...] = field(default_factory=tuple)

    @property
    def failures(self) -> list[ProjectOutcome]:
        return [o for o in self.outcomes if not o.succeeded]

    @property
    def succeeded(self) -> bool:
        return not self.failures

    @property
    def is_empty(self) -> bool:
        """True when no project was active, which is not a failure."""
        return not self.outcomes

    def raise_for_failure(self) -> None:
        """Raise the wrapped error if any project failed.

        A single failure is raised as-is; several are combined into a
        DispatchError listing each of them.
        """
        from ..exceptions import DispatchError

        errors = [o.error for o in self.failures if o.error is not None]
        if not errors:
            return
        if len(errors) == 1:
            raise errors[0]
        raise DispatchError(errors, operation=f"cargo {self.subcommand.value}")
