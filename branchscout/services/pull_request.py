"""
Pull request helpers.

Derive a ticket id from a branch name and compose the hosting service's
"compare" URL that opens a pre-filled pull request form.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote, urlencode

from ..core.exceptions import InvalidArgumentError
from ..core.models.branch import Branch
from ..core.models.remote import Remote
from ..utils.git_url import repository_shorthand

TICKET_ID_RE = re.compile(r"^[A-Z][A-Z0-9]+-\d+$")
BUG_ISSUE_TYPES = frozenset({"Bug", "Story Defect"})
BUG_LABEL = "bug"


def ticket_id_from_branch(branch_name: str, separator: str = "_") -> str | None:
    """
    Get the ticket id a branch name starts with.

    Examples:
        "ISAV-12296_add-login"  -> "ISAV-12296"
        "feature/login"         -> None
    """
    head = branch_name.split(separator, 1)[0]
    return head if TICKET_ID_RE.match(head) else None


def is_bug(issue_type: str) -> bool:
    """Whether an issue tracker type name denotes a defect."""
    return issue_type in BUG_ISSUE_TYPES


def default_title(branch_name: str, separator: str = "_") -> str:
    """
    Build a pull request title from a branch name.

    "ISAV-12296_add-login-button" -> "[ISAV-12296] Add login button"
    """
    ticket = ticket_id_from_branch(branch_name, separator)
    rest = branch_name.split(separator, 1)[1] if ticket and separator in branch_name else branch_name
    words = re.sub(r"[-_/]+", " ", rest).strip()
    words = words[:1].upper() + words[1:]
    return f"[{ticket}] {words}" if ticket else words


@dataclass
class PullRequestURL:
    """Parts of a pull request compare URL."""

    web_url: str
    repository: str
    base: Branch
    target: Branch
    title: str | None = None
    labels: list[str] = field(default_factory=list)
    milestone: str | None = None

    @classmethod
    def for_remote(
        cls,
        web_url: str,
        remote: Remote,
        base: Branch,
        target: Branch,
        **kwargs: Any,
    ) -> PullRequestURL:
        """
        Build from a remote, deriving ``owner/repo`` from its URL.

        Raises:
            InvalidArgumentError: If the remote URL has no owner/repo path
        """
        repository = repository_shorthand(remote.url)
        if repository is None:
            raise InvalidArgumentError(
                "Cannot derive a repository from remote URL", argument="remote", value=remote.url
            )
        return cls(web_url=web_url, repository=repository, base=base, target=target, **kwargs)

    @property
    def url(self) -> str:
        # Remote-sourced branches are addressed by plain name on the host
        base = quote(self.base.name, safe="/")
        target = quote(self.target.name, safe="/")
        query: dict[str, str] = {"expand": "1"}
        if self.title:
            query["title"] = self.title
        if self.labels:
            query["labels"] = ",".join(self.labels)
        if self.milestone:
            query["milestone"] = self.milestone
        return (
            f"{self.web_url.rstrip('/')}/{self.repository}/compare/"
            f"{base}...{target}?{urlencode(query, quote_via=quote)}"
        )
