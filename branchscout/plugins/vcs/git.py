"""
Git interactors.

Implement the branch, commit and remote queries with plain git
plumbing commands. Multi-branch queries run one git command per branch
and emit exactly one line per branch, so the output stays aligned with
the requested order even when a branch has nothing to report.
"""

from __future__ import annotations

from datetime import datetime

from ...core.interfaces.git import IBranchInteractor, ICommitInteractor, IRemoteInteractor
from ...core.models.branch import LocalSource, RemoteSource
from .base import BaseGitInteractor


def _after_args(after: datetime | None) -> list[str]:
    if after is None:
        return []
    return [f"--after={after.isoformat()}"]


class GitBranchInteractor(BaseGitInteractor, IBranchInteractor):
    """Branch queries backed by git."""

    def get_current_branch(self, path: str) -> str:
        return self._run(["rev-parse", "--abbrev-ref", "HEAD"], path)

    def get_all_branches(self, source: LocalSource | RemoteSource, path: str) -> str:
        if isinstance(source, RemoteSource):
            pattern = f"refs/remotes/{source.remote.name}/"
            fmt = "%(refname)"
        else:
            pattern = "refs/heads/"
            fmt = "%(refname:short)"
        return self._run(["for-each-ref", f"--format={fmt}", "--sort=refname", pattern], path)


class GitCommitInteractor(BaseGitInteractor, ICommitInteractor):
    """Commit queries backed by git."""

    def count(
        self,
        base_branches: list[str],
        target_branch: str,
        after: datetime | None,
        path: str,
    ) -> str:
        lines = []
        for base in base_branches:
            out = self._run(
                ["rev-list", "--count", *_after_args(after), f"{base}..{target_branch}", "--"],
                path,
            )
            lines.append(out.strip())
        return "\n".join(lines) + "\n" if lines else ""

    def latest_hashes(
        self,
        branches: list[str],
        after: datetime | None,
        path: str,
    ) -> str:
        lines = []
        for branch in branches:
            out = self._run(
                ["log", "-1", "--format=%h", *_after_args(after), branch, "--"],
                path,
            )
            lines.append(out.strip())
        return "\n".join(lines) + "\n" if lines else ""


class GitRemoteInteractor(BaseGitInteractor, IRemoteInteractor):
    """Remote queries backed by git."""

    def get_all_remotes(self, path: str) -> str:
        return self._run(["remote", "-v"], path)
