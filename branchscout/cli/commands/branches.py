"""
Branch and remote listing commands.

Usage:
    branchscout current
    branchscout branches [--source RAW]
    branchscout remotes
"""

from __future__ import annotations

import click

from ...core.models.branch import LOCAL, LocalSource, RemoteSource
from ..context import BranchscoutContext
from ..decorators import translate_errors
from ..params import SOURCE


@click.command("current")
@click.pass_obj
@translate_errors
def current(ctx: BranchscoutContext) -> None:
    """Show the checked-out branch."""
    click.echo(ctx.branches.current(ctx.path).full_name)


@click.command("branches")
@click.option(
    "--source",
    "source",
    type=SOURCE,
    default=None,
    help="'local' (default) or 'remote <name> <url>'.",
)
@click.option("--remote", "remote_name", default=None, help="List branches of a configured remote.")
@click.pass_obj
@translate_errors
def branches(
    ctx: BranchscoutContext,
    source: LocalSource | RemoteSource | None,
    remote_name: str | None,
) -> None:
    """List branches of the local repository or of a remote."""
    if source is not None and remote_name is not None:
        raise click.UsageError("--source and --remote are mutually exclusive")
    if remote_name is not None:
        source = RemoteSource(remote=ctx.remotes.get(remote_name, ctx.path))
    for branch in ctx.branches.get_all(source or LOCAL, ctx.path):
        click.echo(branch.full_name)


@click.command("remotes")
@click.pass_obj
@translate_errors
def remotes(ctx: BranchscoutContext) -> None:
    """List remotes as '<name> <url>'."""
    for remote in ctx.remotes.get_all(ctx.path):
        click.echo(remote.raw_value)
