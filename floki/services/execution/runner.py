"""
Subprocess-backed build tool runner.

Runs `<cargo> <subcommand> [flags...]` with the project directory as the
working directory and waits for it to exit. Output is not captured; it goes
straight to the user's terminal.
"""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from ...core.interfaces.runner import IToolRunner
from ...core.models.command import ExitOutcome, Subcommand

if TYPE_CHECKING:
    from ...core.interfaces.logger import ILogger


class CargoRunner(IToolRunner):
    """
    Runs the build tool as a blocking child process.

    Usage:
        runner = CargoRunner()
        outcome = runner.run(Subcommand.BUILD, "app", ["--release"])
    """

    def __init__(
        self,
        executable: str = "cargo",
        base_dir: Path | None = None,
        logger: "ILogger | None" = None,
    ) -> None:
        """
        Initialize the runner.

        Args:
            executable: Build tool executable name or path
            base_dir: Directory relative project directories are resolved
                against (defaults to the process working directory)
            logger: Logger for diagnostics
        """
        self._executable = executable
        self._base_dir = base_dir
        self._logger = logger

    def build_args(self, subcommand: Subcommand, flags: Sequence[str] = ()) -> tuple[str, ...]:
        """Return the argv for one invocation."""
        return (self._executable, subcommand.value, *flags)

    def run(
        self,
        subcommand: Subcommand,
        working_dir: str,
        flags: Sequence[str] = (),
    ) -> ExitOutcome:
        args = self.build_args(subcommand, flags)
        cwd = Path(working_dir) if self._base_dir is None else self._base_dir / working_dir

        if self._logger:
            self._logger.debug("Running %s in %s", " ".join(args), cwd)

        # OSError (missing cwd or executable) and ValueError (NUL in a path)
        # propagate to the dispatcher
        result = subprocess.run(list(args), cwd=cwd, check=False)

        if self._logger:
            self._logger.trace("%s exited with %d", " ".join(args), result.returncode)

        return ExitOutcome(args=args, cwd=str(cwd), returncode=result.returncode)
