"""
Native Click implementation of the parent command.

Usage: branchscout parent [--remote NAME] [--default BRANCH]
"""

from __future__ import annotations

import click

from ..context import BranchscoutContext
from ..decorators import translate_errors
from ._resolve import parent_options, resolve_parent


@click.command("parent")
@parent_options
@click.pass_obj
@translate_errors
def parent(
    ctx: BranchscoutContext,
    remote_name: str | None,
    default_name: str | None,
    tie_policy: str | None,
    since_days: int | None,
) -> None:
    """Infer the branch the current branch was cut from.

    Ranks the remote's branches by how many commits the current branch
    is ahead of each and prints the closest one. Prints the default
    branch when the closest distance is shared by several branches.
    """
    _, _, parent_branch = resolve_parent(ctx, remote_name, default_name, tie_policy, since_days)
    click.echo(parent_branch.full_name)
