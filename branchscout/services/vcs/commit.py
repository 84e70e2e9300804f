"""
Commit queries.

Counts commits between branches and fetches latest commit hashes,
parsing the raw interactor output into values aligned with the
requested branches.
"""

from __future__ import annotations

from datetime import datetime

from ...core.di import resolve_or_default
from ...core.exceptions import NumberNotFoundError
from ...core.interfaces.git import ICommitInteractor
from ...core.interfaces.logger import ILogger
from ...core.models.branch import Branch
from ..logging import NullLogger


class CommitService:
    """
    Stateless commit query surface.

    Usage:
        service = CommitService(GitCommitInteractor())
        ahead = service.count(base, target, after=None, path=repo_root)
    """

    def __init__(self, interactor: ICommitInteractor, logger: ILogger | None = None) -> None:
        self._interactor = interactor
        self._logger = logger or resolve_or_default(ILogger, NullLogger)

    def count(
        self,
        base_branch: Branch,
        target_branch: Branch,
        after: datetime | None = None,
        path: str = "",
    ) -> int:
        """
        Count commits on target_branch that are not on base_branch.

        Args:
            base_branch: Branch to compare against
            target_branch: Branch whose extra commits are counted
            after: Only count commits newer than this, if given
            path: Repository path

        Returns:
            Number of commits target_branch is ahead of base_branch
        """
        [(_, number)] = self.count_many([base_branch], target_branch, after, path)
        return number

    def count_many(
        self,
        base_branches: list[Branch],
        target_branch: Branch,
        after: datetime | None = None,
        path: str = "",
    ) -> list[tuple[Branch, int]]:
        """
        Count commits on target_branch that are not on each base branch.

        All bases are compared in a single interactor query.

        Returns:
            (base branch, count) pairs in base_branches order

        Raises:
            NumberNotFoundError: If base_branches is empty, or the output
                does not hold exactly one integer per base branch
        """
        if not base_branches:
            raise NumberNotFoundError(
                "No base branches to count commits against",
                context={"target_branch": target_branch.full_name},
            )

        raw = self._interactor.count(
            [b.full_name for b in base_branches], target_branch.full_name, after, path
        )
        numbers = self._parse_counts(raw)

        if len(numbers) != len(base_branches):
            raise NumberNotFoundError(
                "Commit count output does not match the base branches",
                context={"expected": len(base_branches), "found": len(numbers)},
            )

        counts = list(zip(base_branches, numbers))
        self._logger.debug(
            "Commit counts for %s: %s",
            target_branch.full_name,
            ", ".join(f"{b.full_name}={n}" for b, n in counts),
        )
        return counts

    def latest_hashes(
        self,
        branches: list[Branch],
        after: datetime | None = None,
        path: str = "",
    ) -> list[str]:
        """
        Get the latest commit hash of each branch.

        Returns:
            Hash strings in branches order; "" marks a branch with no
            commit in range. Trailing filler lines from the interactor are
            kept, so filter out empty strings when only real hashes matter.
        """
        if not branches:
            return []
        raw = self._interactor.latest_hashes([b.full_name for b in branches], after, path)
        return [line.strip() for line in raw.splitlines()]

    @staticmethod
    def _parse_counts(raw: str) -> list[int]:
        numbers = []
        for token in raw.split():
            try:
                number = int(token)
            except ValueError as e:
                raise NumberNotFoundError(
                    "Commit count output is not a number", context={"value": token}, cause=e
                ) from e
            if number < 0:
                raise NumberNotFoundError(
                    "Commit count output is negative", context={"value": token}
                )
            numbers.append(number)
        return numbers
