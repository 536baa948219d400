"""
Click-based CLI for floki.

This module provides the main Click command group and serves as the
entry point for the floki CLI.

Usage:
    from floki.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from .context import FlokiContext

# Version is loaded from package metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("floki")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="floki")
@click.option(
    "-r",
    "--release",
    is_flag=True,
    default=False,
    help="Build artifacts in release mode, with optimizations.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Verbosity (none: errors & warnings, -v: verbose, -vv: very verbose, -vvv: everything).",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to configuration file (defaults to './floki.toml').",
)
@click.pass_context
def cli(ctx: click.Context, release: bool, verbose: int, config_path: Path | None) -> None:
    """floki - run cargo across the app and client projects

    \b
    Projects:
        app      ./app, or [floki] main_service in floki.toml
        client   ./client, or [floki] client_service in floki.toml

    \b
    Quick Start:
        floki init             Add a default floki.toml
        floki build            cargo build in each project
        floki -r test          cargo test --release in each project
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    ctx.obj = FlokiContext.create(release=release, verbose=verbose, config_path=config_path)
    ctx.obj.bootstrap()


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


# Register commands at module load time
register_commands()


__all__ = [
    "FlokiContext",
    "__version__",
    "cli",
    "register_commands",
]
