"""
Filesystem query interface.

Project resolution only needs to know whether a directory exists; keeping
that behind an interface lets resolution run against a fake in tests.
"""

from abc import ABC, abstractmethod


class IFileSystem(ABC):
    """Read-only filesystem queries used during project resolution."""

    @abstractmethod
    def directory_exists(self, name: str) -> bool:
        """
        Check whether a directory exists.

        Args:
            name: Directory name relative to the working directory

        Returns:
            True only if the path exists and is a directory
        """
        pass
