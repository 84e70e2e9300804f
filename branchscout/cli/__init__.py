"""
Click-based CLI for branchscout.

This module provides the main Click command group and serves as the
entry point for the branchscout CLI.

Usage:
    from branchscout.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from .. import __version__
from .context import BranchscoutContext


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="branchscout")
@click.option(
    "--path",
    "-C",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Run as if started in this directory.",
)
@click.option("--verbose", "-v", is_flag=True, help="Print debug logs to stderr.")
@click.pass_context
def cli(ctx: click.Context, path: Path | None, verbose: bool) -> None:
    """branchscout - find the branch a pull request should target

    Infers which remote branch the current branch was cut from and
    opens a pull request against it.

    \b
    Branches:
        branchscout current          Show the checked-out branch
        branchscout branches         List local or remote branches
        branchscout ahead            Check for unpushed commits
        branchscout parent           Infer the parent branch

    \b
    Pull requests:
        branchscout open             Open a pull request form in the browser

    \b
    Configuration:
        branchscout config           View or set configuration
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    elif not isinstance(ctx.obj, BranchscoutContext):
        ctx.obj = BranchscoutContext.create(cwd=path, verbose=verbose)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "BranchscoutContext",
    "cli",
    "register_commands",
]
