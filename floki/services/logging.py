"""
Logger implementation for floki internal diagnostics.

Wraps stdlib logging with a stderr console handler whose level follows the
-v count given on the command line.
"""

import logging
import sys
from typing import Any, ClassVar

from ..core.interfaces.logger import ILogger

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def verbosity_to_level(verbose: int) -> str:
    """Map the -v count to a level name (none: warnings, -vvv: everything)."""
    if verbose <= 0:
        return "warning"
    if verbose == 1:
        return "info"
    if verbose == 2:
        return "debug"
    return "trace"


class FlokiLogger(ILogger):
    """
    Logger implementation using stdlib logging.

    Writes to stderr without timestamps.
    """

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "trace": TRACE,
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "floki",
        level: str = "warning",
        stream=None,
    ) -> None:
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Initial log level (trace, debug, info, warning, error)
            stream: Output stream (defaults to sys.stderr)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(TRACE)  # Let the handler filter
        self._logger.handlers.clear()
        self._logger.propagate = False

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setLevel(self.LEVEL_MAP.get(level.lower(), logging.WARNING))
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self._logger.addHandler(handler)
        self._handler = handler

    @property
    def level(self) -> int:
        return self._handler.level

    def trace(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a trace-level message."""
        self._logger.log(TRACE, message, *args, **kwargs)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug-level message."""
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an info-level message."""
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning-level message."""
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an error-level message."""
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        """Set log level for the console handler."""
        self._handler.setLevel(self.LEVEL_MAP.get(level.lower(), logging.WARNING))


class NullLogger(ILogger):
    """No-op logger for testing or when logging is disabled."""

    def trace(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def set_level(self, level: str) -> None:
        """No-op."""
        pass
