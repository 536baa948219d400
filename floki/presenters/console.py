"""
Console presenter for terminal output.

Implements human-readable output formatting for the CLI.
"""

import sys

from ..core.interfaces.presenter import IPresenter


class ConsolePresenter(IPresenter):
    """
    Console output presenter.

    Status lines go to stdout; warnings and errors to stderr.
    """

    def __init__(self, use_color: bool = True, file=None, err_file=None) -> None:
        """
        Initialize console presenter.

        Args:
            use_color: Whether to use ANSI color codes (only on a TTY)
            file: Output file (defaults to sys.stdout)
            err_file: Error output file (defaults to sys.stderr)
        """
        self._file = file or sys.stdout
        self._err_file = err_file or sys.stderr
        self._use_color = use_color and self._err_file.isatty()

    def print(self, message: str) -> None:
        """Print a message to output."""
        print(message, file=self._file)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        if self._use_color:
            print(f"\033[91mError: {message}\033[0m", file=self._err_file)
        else:
            print(f"Error: {message}", file=self._err_file)

    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        if self._use_color:
            print(f"\033[93mWarning: {message}\033[0m", file=self._err_file)
        else:
            print(f"Warning: {message}", file=self._err_file)

    def print_success(self, message: str) -> None:
        """Print a success message."""
        if self._use_color:
            print(f"\033[92m{message}\033[0m", file=self._file)
        else:
            print(message, file=self._file)
