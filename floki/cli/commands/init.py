"""
Native Click implementation of the init command.

Usage: floki init
"""

import click

from ..context import FlokiContext
from ..decorators import pass_floki_context, report_errors


@click.command("init")
@pass_floki_context
@report_errors
def init(ctx: FlokiContext) -> None:
    """Add a default floki.toml file to the current directory.

    An existing floki.toml is overwritten.
    """
    path = ctx.resolver().save_default_file(ctx.cwd)
    ctx.presenter.print_success(f"Created {path}")
