"""
Shared execution logic for the cargo-forwarding commands.

Every one of build/test/clean/update/doc does the same thing: load
floki.toml, resolve the active projects and dispatch the subcommand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...core.models.command import DispatchResult, Subcommand
    from ..context import FlokiContext


def run_cargo(
    ctx: FlokiContext,
    subcommand: Subcommand,
    keep_going: bool = False,
) -> DispatchResult:
    """
    Resolve projects and run a cargo subcommand in each of them.

    Args:
        ctx: FlokiContext with global options
        subcommand: Subcommand to dispatch
        keep_going: Attempt every project even after a failure

    Returns:
        DispatchResult of the dispatch

    Raises:
        FlokiException: If the config cannot be loaded or any project fails
    """
    resolver = ctx.resolver()
    config = resolver.load_or_default(ctx.config_path)
    projects = resolver.resolve(config)

    if projects.is_empty:
        ctx.presenter.print_warning(
            "No app or client project found (configure floki.toml or add ./app, ./client)"
        )

    result = ctx.dispatcher().dispatch(
        subcommand,
        projects,
        release=ctx.release,
        keep_going=keep_going,
    )
    result.raise_for_failure()
    return result
