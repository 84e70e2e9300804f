"""
Shared parent-resolution options for the parent and open commands.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from ...core.models.branch import Branch
from ...core.models.remote import Remote
from ..context import BranchscoutContext


def parent_options(f: Callable[..., Any]) -> Callable[..., Any]:
    """Add the options that steer parent resolution."""
    options = [
        click.option("--remote", "remote_name", default=None, help="Remote to search."),
        click.option(
            "--default", "default_name", default=None, help="Branch to use when ambiguous."
        ),
        click.option(
            "--tie-policy",
            type=click.Choice(["fallback", "latest"]),
            default=None,
            help="How to settle tied commit counts.",
        ),
        click.option(
            "--since-days",
            type=click.IntRange(min=1),
            default=None,
            help="Only consider commits from the last N days.",
        ),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def resolve_parent(
    ctx: BranchscoutContext,
    remote_name: str | None,
    default_name: str | None,
    tie_policy: str | None,
    since_days: int | None,
) -> tuple[Branch, Remote, Branch]:
    """Resolve (current branch, remote, parent branch) from options and config."""
    remote = ctx.remotes.get(remote_name or ctx.settings.git.remote, ctx.path)
    branch = ctx.branches.current(ctx.path)
    parent = ctx.branches.parent(
        branch,
        remote,
        ctx.default_branch(default_name),
        ctx.path,
        after=ctx.lookback(since_days),
        tie_policy=tie_policy or ctx.settings.parent.tie_policy,
    )
    return branch, remote, parent
