"""
Entry point for the `floki` command-line interface.

floki runs a cargo subcommand (build, test, clean, update, doc) in the app
and client project directories of a repository, as configured in floki.toml.

This module provides the main() entry point that delegates to the Click CLI.
"""

import sys


def strip_cargo_subcommand(argv: list[str]) -> list[str]:
    """Drop the "floki" argument cargo inserts when run as `cargo floki`."""
    if argv and argv[0] == "floki":
        return argv[1:]
    return argv


def main():
    """Main entry point for the floki CLI."""
    from .cli import cli

    cli(args=strip_cargo_subcommand(sys.argv[1:]), prog_name="floki")


if __name__ == "__main__":
    main()
