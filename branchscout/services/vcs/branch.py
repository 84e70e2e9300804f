"""
Branch queries and parent branch resolution.

There is no reliable "which branch was this cut from" primitive in git,
so parent() ranks the branches of a remote by how many commits the
feature branch is ahead of each. The candidate with the fewest is the
closest point of divergence. When several candidates share the minimum
the answer is ambiguous, and the caller's default branch is returned
instead of a guess.
"""

from __future__ import annotations

from datetime import datetime

from ...core.di import resolve_or_default
from ...core.interfaces.git import IBranchInteractor
from ...core.interfaces.logger import ILogger
from ...core.models.branch import LOCAL, Branch, LocalSource, RemoteSource
from ...core.models.config import TiePolicy
from ...core.models.remote import Remote
from ..logging import NullLogger
from .commit import CommitService


def parse_branch_listing(raw: str, source: LocalSource | RemoteSource) -> list[Branch]:
    """
    Parse branch listing output into branches of the given source.

    Accepts ``git for-each-ref`` and ``git branch`` style lines: blank
    lines, the ``*`` current-branch marker, ``HEAD`` entries and
    symbolic ``a -> b`` lines are skipped.
    """
    branches = []
    for line in raw.splitlines():
        name = line.strip().removeprefix("* ").strip()
        if not name or " -> " in name:
            continue
        if name == "HEAD" or name.endswith("/HEAD") or name.startswith("("):
            continue
        branches.append(Branch(name=name, source=source))
    return branches


class BranchService:
    """
    Branch enumeration and comparison.

    Args:
        interactor: Branch query seam
        commits: Commit query service used for ahead/parent checks
        logger: Diagnostic logger (default: resolved from the container)
    """

    def __init__(
        self,
        interactor: IBranchInteractor,
        commits: CommitService,
        logger: ILogger | None = None,
    ) -> None:
        self._interactor = interactor
        self._commits = commits
        self._logger = logger or resolve_or_default(ILogger, NullLogger)

    def current(self, path: str = "") -> Branch:
        """Get the checked-out branch; always a local branch."""
        name = self._interactor.get_current_branch(path).strip()
        return Branch(name=name, source=LOCAL)

    def get_all(self, source: LocalSource | RemoteSource = LOCAL, path: str = "") -> list[Branch]:
        """Get every branch of a source, in the order git lists them."""
        return parse_branch_listing(self._interactor.get_all_branches(source, path), source)

    def is_ahead(self, branch: Branch, remote: Remote, path: str = "") -> bool:
        """Check whether branch has commits its counterpart on remote lacks."""
        counterpart = branch.on(RemoteSource(remote=remote))
        return self._commits.count(counterpart, branch, None, path) > 0

    def parent(
        self,
        branch: Branch,
        remote: Remote,
        default_branch: Branch,
        path: str = "",
        *,
        after: datetime | None = None,
        tie_policy: TiePolicy = "fallback",
    ) -> Branch:
        """
        Infer the branch on remote that branch was most likely cut from.

        Args:
            branch: Feature branch to find the parent of
            remote: Remote whose branches are the candidates
            default_branch: Returned when the answer is ambiguous
            path: Repository path
            after: Only consider commits newer than this, if given
            tie_policy: "fallback" returns default_branch on a tied
                minimum; "latest" first narrows the tie to candidates
                with a commit in range and only falls back if that
                does not leave exactly one

        Returns:
            The remote branch with the uniquely smallest ahead count,
            or default_branch
        """
        candidates = [
            b for b in self.get_all(RemoteSource(remote=remote), path) if b.name != branch.name
        ]
        if not candidates:
            self._logger.info(
                "No candidate branches on %s, using %s", remote.name, default_branch.full_name
            )
            return default_branch

        counts = self._commits.count_many(candidates, branch, after, path)
        hashes = self._commits.latest_hashes(candidates, after, path)

        lowest = min(number for _, number in counts)
        closest = [(i, b) for i, (b, number) in enumerate(counts) if number == lowest]

        if len(closest) == 1:
            parent = closest[0][1]
            self._logger.debug(
                "Parent of %s is %s (%d commits ahead)", branch.full_name, parent.full_name, lowest
            )
            return parent

        if tie_policy == "latest":
            active = [b for i, b in closest if i < len(hashes) and hashes[i]]
            if len(active) == 1:
                self._logger.debug(
                    "Tie at %d commits broken by latest commit: %s", lowest, active[0].full_name
                )
                return active[0]

        self._logger.info(
            "Ambiguous parent for %s (%s tied at %d commits), using %s",
            branch.full_name,
            ", ".join(b.full_name for _, b in closest),
            lowest,
            default_branch.full_name,
        )
        return default_branch
