"""
Custom exception hierarchy for floki.

Every error carries the operation that failed and the path or project it
concerns, so the CLI can present it as a single readable line.
"""

from __future__ import annotations


class FlokiException(Exception):
    """
    Base exception for all floki errors.

    Attributes:
        message: Human-readable error description
        operation: Short label of the operation that failed (e.g. "read config")
        context: Additional identifying context (file paths, projects, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.operation = operation
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        text = f"{self.operation}: {self.message}" if self.operation else self.message
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{text} ({ctx_str})"
        return text


def describe_os_error(error: BaseException) -> str:
    """Return the OS-level reason of an error without errno noise."""
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error) or type(error).__name__


# =============================================================================
# I/O Errors
# =============================================================================


class FlokiIOError(FlokiException):
    """Base class for filesystem read/write/exec failures."""

    pass


class ConfigFileError(FlokiIOError):
    """
    Error reading or writing a configuration file.

    Raised for file not found, permission errors, undecodable content, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = "read config",
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, operation=operation, context=ctx, cause=cause)
        self.file_path = file_path


class ToolSpawnError(FlokiIOError):
    """
    The build tool could not be started for a project.

    Raised when the project directory does not exist or the executable
    cannot be found or run.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        project: str | None = None,
        directory: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if project:
            ctx["project"] = project
        if directory:
            ctx["directory"] = directory
        super().__init__(message, operation=operation, context=ctx, cause=cause)
        self.project = project
        self.directory = directory


# =============================================================================
# Parse Errors
# =============================================================================


class FlokiParseError(FlokiException, ValueError):
    """
    Base class for configuration deserialization failures.

    Inherits from ValueError so callers validating input can catch it as such.
    """

    pass


class ConfigParseError(FlokiParseError):
    """Configuration content was read but does not match the expected schema."""

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = "read config",
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, operation=operation, context=ctx, cause=cause)
        self.file_path = file_path


# =============================================================================
# Execution Errors
# =============================================================================


class FlokiExecutionError(FlokiException):
    """Base class for errors raised while running the build tool."""

    pass


class ExternalToolError(FlokiExecutionError):
    """
    The build tool exited with a nonzero status.

    The tool's own exit status becomes the suggested CLI exit code.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        subcommand: str | None = None,
        project: str | None = None,
        directory: str | None = None,
        returncode: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if project:
            ctx["project"] = project
        if directory:
            ctx["directory"] = directory
        if returncode is not None:
            ctx["returncode"] = returncode
        super().__init__(message, operation=operation, context=ctx, cause=cause)
        self.subcommand = subcommand
        self.project = project
        self.directory = directory
        self.returncode = returncode
        if returncode is not None and 0 < returncode < 256:
            self.exit_code = returncode


class DispatchError(FlokiExecutionError):
    """More than one project failed during a single dispatch."""

    def __init__(
        self,
        failures: list[FlokiException],
        *,
        operation: str | None = None,
    ) -> None:
        self.failures = list(failures)
        summary = "; ".join(_failure_summary(f) for f in self.failures)
        super().__init__(
            f"{len(self.failures)} projects failed: {summary}",
            operation=operation,
        )


def _failure_summary(error: FlokiException) -> str:
    project = getattr(error, "project", None)
    return f"{project} ({error.message})" if project else error.message


class CommandNotImplementedError(FlokiException, NotImplementedError):
    """A command exists in the command surface but has no behavior yet."""

    def __init__(self, command: str) -> None:
        super().__init__(f"'{command}' is not implemented yet", operation=command)
        self.command = command
