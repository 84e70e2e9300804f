"""
Native Click implementation of the open command.

Usage: branchscout open [--title TEXT] [--label NAME]... [--milestone NAME] [--issue-type TYPE]
"""

from __future__ import annotations

import click

from ...core.models.branch import RemoteSource
from ...services.pull_request import BUG_LABEL, PullRequestURL, default_title, is_bug
from ..context import BranchscoutContext
from ..decorators import translate_errors
from ._resolve import parent_options, resolve_parent


@click.command("open")
@parent_options
@click.option("--title", default=None, help="Pull request title (default: from branch name).")
@click.option("--label", "labels", multiple=True, help="Label to apply (repeatable).")
@click.option("--milestone", default=None, help="Milestone to assign.")
@click.option(
    "--issue-type",
    default=None,
    help="Issue tracker type of the ticket; defect types add the bug label.",
)
@click.option("--print-only", is_flag=True, help="Print the URL without opening it.")
@click.pass_obj
@translate_errors
def open_pull_request(
    ctx: BranchscoutContext,
    remote_name: str | None,
    default_name: str | None,
    tie_policy: str | None,
    since_days: int | None,
    title: str | None,
    labels: tuple[str, ...],
    milestone: str | None,
    issue_type: str | None,
    print_only: bool,
) -> None:
    """Open a pull request from the current branch to its parent.

    \b
    Examples:
        branchscout open
        branchscout open --label ui --milestone 1.4.0
        branchscout open --issue-type "Story Defect"
        branchscout open --print-only
    """
    branch, remote, parent_branch = resolve_parent(
        ctx, remote_name, default_name, tie_policy, since_days
    )
    separator = ctx.settings.pull_request.ticket_separator
    pr_labels = list(labels)
    if issue_type and is_bug(issue_type) and BUG_LABEL not in pr_labels:
        pr_labels.append(BUG_LABEL)

    pull_request = PullRequestURL.for_remote(
        ctx.settings.pull_request.web_url,
        remote,
        base=parent_branch,
        target=branch.on(RemoteSource(remote=remote)),
        title=title or default_title(branch.name, separator),
        labels=pr_labels,
        milestone=milestone,
    )
    url = pull_request.url
    click.echo(url)

    if not print_only:
        click.launch(url)
