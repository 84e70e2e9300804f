"""
Git command interactor interface definitions.

These are the only seam between the branch/commit/remote model and the
operating environment. Each interactor returns the raw text a query
produces; all parsing happens in the services, so an implementation
backed by canned fixture text behaves exactly like the real git one.

Every method raises CommandExecutionError when the query cannot run.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ..models.branch import LocalSource, RemoteSource


class IBranchInteractor(ABC):
    """Queries needed to enumerate branches."""

    @abstractmethod
    def get_current_branch(self, path: str) -> str:
        """
        Get the name of the checked-out branch.

        Args:
            path: Repository path ("" for the current directory)

        Returns:
            A single line holding the branch name
        """
        pass

    @abstractmethod
    def get_all_branches(self, source: LocalSource | RemoteSource, path: str) -> str:
        """
        List the branches of a source.

        Args:
            source: Local repository or a specific remote
            path: Repository path

        Returns:
            Newline-delimited branch names; blank lines are allowed
        """
        pass


class ICommitInteractor(ABC):
    """Queries needed to compare branches by commits."""

    @abstractmethod
    def count(
        self,
        base_branches: list[str],
        target_branch: str,
        after: datetime | None,
        path: str,
    ) -> str:
        """
        Count commits reachable from target but not from each base.

        Args:
            base_branches: Full names of the branches to compare against
            target_branch: Full name of the branch being compared
            after: Only count commits newer than this, if given
            path: Repository path

        Returns:
            One integer per base branch, in base_branches order
        """
        pass

    @abstractmethod
    def latest_hashes(
        self,
        branches: list[str],
        after: datetime | None,
        path: str,
    ) -> str:
        """
        Get the latest commit hash of each branch.

        Args:
            branches: Full names of the branches
            after: Only consider commits newer than this, if given
            path: Repository path

        Returns:
            Newline-delimited hashes in branches order; an empty line means
            the branch has no commit in range
        """
        pass


class IRemoteInteractor(ABC):
    """Queries needed to enumerate remotes."""

    @abstractmethod
    def get_all_remotes(self, path: str) -> str:
        """
        List configured remotes.

        Args:
            path: Repository path

        Returns:
            ``git remote -v`` style lines: name, URL and an optional
            ``(fetch)``/``(push)`` marker separated by whitespace
        """
        pass
