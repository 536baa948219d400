"""
Click decorators for floki CLI commands.

- report_errors: turns a FlokiException into one error line and a nonzero exit
- pass_floki_context: typed @click.pass_obj
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

from ..core.exceptions import FlokiException

if TYPE_CHECKING:
    from .context import FlokiContext

F = TypeVar("F", bound=Callable[..., Any])


def report_errors(f: F) -> F:
    """Decorator to report floki errors and exit with their exit code.

    Usage:
        @cli.command()
        @pass_floki_context
        @report_errors
        def build(ctx: FlokiContext):
            ...

    Note:
        This decorator should be applied AFTER @click.pass_obj so that
        the FlokiContext is available.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        ctx_maybe: Any = args[0] if args else kwargs.get("ctx")

        if ctx_maybe is None:
            raise click.ClickException(
                "Internal error: FlokiContext not available. "
                "Ensure @click.pass_obj is applied before @report_errors."
            )
        ctx: FlokiContext = ctx_maybe

        try:
            return f(*args, **kwargs)
        except FlokiException as e:
            if e.__cause__ is not None:
                ctx.logger.debug("Caused by: %r", e.__cause__)
            ctx.presenter.print_error(str(e))
            raise SystemExit(e.exit_code) from e

    return wrapper  # type: ignore[return-value]


def pass_floki_context(f: F) -> F:
    """Convenience decorator combining @click.pass_obj with type hints.

    Usage:
        @cli.command()
        @pass_floki_context
        def build(ctx: FlokiContext):
            ...
    """
    return click.pass_obj(f)  # type: ignore[return-value]
