"""
Native Click implementation of the run command.

Usage: floki run
"""

import click

from ...core.exceptions import CommandNotImplementedError
from ..context import FlokiContext
from ..decorators import pass_floki_context, report_errors


@click.command("run")
@pass_floki_context
@report_errors
def run(ctx: FlokiContext) -> None:
    """Run the app (not implemented yet)."""
    raise CommandNotImplementedError("run")
