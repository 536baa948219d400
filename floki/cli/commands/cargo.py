"""
Native Click implementations of the cargo-forwarding commands.

Usage: floki [--release] build|test|clean|update|doc [--keep-going]
"""

import click

from ...core.models.command import Subcommand
from ..context import FlokiContext
from ..decorators import pass_floki_context, report_errors
from ._execution import run_cargo

keep_going_option = click.option(
    "-k",
    "--keep-going",
    is_flag=True,
    default=False,
    help="Run the remaining projects after one fails and report every failure.",
)


def _cargo_command(subcommand: Subcommand, help_text: str) -> click.Command:
    """Create the click command forwarding one cargo subcommand."""

    @click.command(subcommand.value, help=help_text)
    @keep_going_option
    @pass_floki_context
    @report_errors
    def command(ctx: FlokiContext, keep_going: bool) -> None:
        run_cargo(ctx, subcommand, keep_going=keep_going)

    return command


build = _cargo_command(Subcommand.BUILD, "Compile the app and client.")
test = _cargo_command(Subcommand.TEST, "Run the cargo tests for app and client.")
clean = _cargo_command(Subcommand.CLEAN, "Remove the target directories of app and client.")
update = _cargo_command(Subcommand.UPDATE, "Run cargo update for app and client.")
doc = _cargo_command(Subcommand.DOC, "Build the documentation of app and client.")
