"""
Native Click implementation of the ahead command.

Usage: branchscout ahead [--remote NAME]
"""

from __future__ import annotations

import click

from ...core.models.branch import Branch
from ..context import BranchscoutContext
from ..decorators import translate_errors


@click.command("ahead")
@click.option("--remote", "remote_name", default=None, help="Remote to compare with.")
@click.option("--branch", "branch_name", default=None, help="Branch to check (default: current).")
@click.pass_obj
@translate_errors
def ahead(ctx: BranchscoutContext, remote_name: str | None, branch_name: str | None) -> None:
    """Check whether a branch has commits its remote counterpart lacks.

    Prints 'yes' or 'no'.
    """
    remote = ctx.remotes.get(remote_name or ctx.settings.git.remote, ctx.path)
    if branch_name:
        branch = Branch(name=branch_name)
    else:
        branch = ctx.branches.current(ctx.path)
    click.echo("yes" if ctx.branches.is_ahead(branch, remote, ctx.path) else "no")
