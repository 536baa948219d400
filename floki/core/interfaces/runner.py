"""
Build tool runner interface.

The dispatcher only decides where and with which flags the tool runs;
actually running it is delegated to an IToolRunner.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..models.command import ExitOutcome, Subcommand


class IToolRunner(ABC):
    """Runs one build tool subcommand in a working directory."""

    @abstractmethod
    def run(
        self,
        subcommand: Subcommand,
        working_dir: str,
        flags: Sequence[str] = (),
    ) -> ExitOutcome:
        """
        Run the tool and block until it exits.

        Args:
            subcommand: Subcommand to run
            working_dir: Directory to run the tool in
            flags: Extra flags appended after the subcommand

        Returns:
            ExitOutcome with the process return code

        Raises:
            OSError: If the process could not be started (missing directory,
                missing executable, permission denied)
            ValueError: If the working directory contains a NUL byte
        """
        pass
