"""
Command dispatcher service.

Runs one build tool subcommand across the active projects, app first and
then client, one blocking invocation at a time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.exceptions import ExternalToolError, FlokiException, ToolSpawnError, describe_os_error
from ...core.models.command import DispatchResult, ProjectOutcome, Subcommand

if TYPE_CHECKING:
    from ...core.interfaces.logger import ILogger
    from ...core.interfaces.presenter import IPresenter
    from ...core.interfaces.runner import IToolRunner
    from ...core.models.projects import Projects, ProjectSlot

RELEASE_FLAG = "--release"


class CommandDispatcher:
    """
    Service for dispatching a subcommand to every active project.

    Handles:
    - Fixed app-then-client ordering
    - Silently skipping inactive slots
    - Wrapping failures with subcommand/project context
    - Stopping at the first failure unless keep_going is set

    Usage:
        dispatcher = CommandDispatcher(runner, logger, presenter)
        result = dispatcher.dispatch(Subcommand.BUILD, projects, release=True)
        result.raise_for_failure()
    """

    def __init__(
        self,
        runner: IToolRunner,
        logger: ILogger | None = None,
        presenter: IPresenter | None = None,
    ) -> None:
        """
        Initialize dispatcher.

        Args:
            runner: Runs the build tool for a single project
            logger: Logger for diagnostics
            presenter: Presenter for per-project progress lines
        """
        if logger is None:
            from ..logging import NullLogger

            logger = NullLogger()
        self._runner = runner
        self._logger = logger
        self._presenter = presenter

    def dispatch(
        self,
        subcommand: Subcommand,
        projects: Projects,
        release: bool = False,
        keep_going: bool = False,
    ) -> DispatchResult:
        """
        Run a subcommand in each active project directory.

        Args:
            subcommand: Build tool subcommand
            projects: Resolved project directories
            release: Append --release to each invocation
            keep_going: Attempt every project even after a failure

        Returns:
            DispatchResult with one outcome per attempted project
        """
        flags = (RELEASE_FLAG,) if release else ()
        outcomes: list[ProjectOutcome] = []

        for slot, directory in projects.active():
            self._print(f"[{slot.value}] cargo {subcommand.value} in {directory}")
            outcome = self._run_project(subcommand, slot, directory, flags)
            outcomes.append(outcome)

            if outcome.error is not None:
                self._logger.debug("%s failed for %s: %s", subcommand.value, slot.value, outcome.error)
                if not keep_going:
                    break

        if not outcomes:
            self._logger.info("No active projects, nothing to %s", subcommand.value)

        return DispatchResult(subcommand=subcommand, outcomes=tuple(outcomes))

    def _run_project(
        self,
        subcommand: Subcommand,
        slot: ProjectSlot,
        directory: str,
        flags: tuple[str, ...],
    ) -> ProjectOutcome:
        """Run the tool for one slot and classify the result."""
        operation = f"cargo {subcommand.value}"
        self._logger.info("Running %s for %s in %s", operation, slot.value, directory)

        error: FlokiException | None = None
        try:
            exit_outcome = self._runner.run(subcommand, directory, flags)
        except (OSError, ValueError) as e:
            # ValueError: a directory name the OS cannot accept (embedded NUL)
            error = ToolSpawnError(
                describe_os_error(e),
                operation=operation,
                project=slot.value,
                directory=directory,
                cause=e,
            )
        else:
            if not exit_outcome.succeeded:
                error = ExternalToolError(
                    f"exited with status {exit_outcome.returncode}",
                    operation=operation,
                    subcommand=subcommand.value,
                    project=slot.value,
                    directory=directory,
                    returncode=exit_outcome.returncode,
                )

        return ProjectOutcome(slot=slot, directory=directory, subcommand=subcommand, error=error)

    def _print(self, message: str) -> None:
        if self._presenter:
            self._presenter.print(message)
