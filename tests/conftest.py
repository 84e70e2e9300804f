"""
Shared pytest fixtures for branchscout tests.

This module provides:
- Fixture-backed interactors that replay recorded git output from
  tests/fixtures/*.txt, so services can be tested without a repository
- temp_git_repo: Creates an isolated git repository with a bare "origin"
- git_commit: Helper to add commits between steps
"""

import shutil
import subprocess
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest

from branchscout.core.bootstrap import reset
from branchscout.core.interfaces.git import (
    IBranchInteractor,
    ICommitInteractor,
    IRemoteInteractor,
)
from branchscout.core.models.branch import LocalSource, RemoteSource
from branchscout.core.models.remote import Remote
from branchscout.services.vcs import BranchService, CommitService, RemoteService

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    """Read tests/fixtures/<name>.txt."""
    return (FIXTURES_DIR / f"{name}.txt").read_text()


class FixtureBranchInteractor(IBranchInteractor):
    """Replays the current branch and per-source branch listings."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def get_current_branch(self, path: str) -> str:
        self.calls.append(("current", path))
        return load_fixture("current_branch")

    def get_all_branches(self, source: LocalSource | RemoteSource, path: str) -> str:
        self.calls.append((source.raw_value, path))
        if isinstance(source, RemoteSource):
            return load_fixture(f"all_{source.remote.name}_remote_branches")
        return load_fixture("all_local_branches")


class FixtureCommitInteractor(ICommitInteractor):
    """
    Replays commit counts and latest hashes.

    Args:
        count_fixture: Fixture returned for multi-base counts
        single_count_fixture: Fixture returned for single-base counts
        hashes_fixture: Fixture returned for latest hashes
    """

    def __init__(
        self,
        count_fixture: str = "commit_count_multiple",
        single_count_fixture: str = "commit_count_single",
        hashes_fixture: str = "latest_commit_hashes",
    ) -> None:
        self.count_fixture = count_fixture
        self.single_count_fixture = single_count_fixture
        self.hashes_fixture = hashes_fixture
        self.count_calls: list[tuple[list[str], str, datetime | None, str]] = []
        self.hashes_calls: list[tuple[list[str], datetime | None, str]] = []

    def count(
        self,
        base_branches: list[str],
        target_branch: str,
        after: datetime | None,
        path: str,
    ) -> str:
        self.count_calls.append((list(base_branches), target_branch, after, path))
        if len(base_branches) == 1:
            return load_fixture(self.single_count_fixture)
        return load_fixture(self.count_fixture)

    def latest_hashes(self, branches: list[str], after: datetime | None, path: str) -> str:
        self.hashes_calls.append((list(branches), after, path))
        return load_fixture(self.hashes_fixture)


class FixtureRemoteInteractor(IRemoteInteractor):
    """Replays ``git remote -v`` output."""

    def __init__(self, fixture: str = "remotes") -> None:
        self.fixture = fixture

    def get_all_remotes(self, path: str) -> str:
        return load_fixture(self.fixture)


@pytest.fixture(autouse=True)
def clean_container():
    """Reset the service container so no test sees another's registrations."""
    reset()
    yield
    reset()


@pytest.fixture
def origin() -> Remote:
    return Remote(name="origin", url="https://github.com/user/repo.git")


@pytest.fixture
def ssh_origin() -> Remote:
    return Remote(name="ssh_origin", url="git@github.com:user/repo.git")


@pytest.fixture
def make_branch_service() -> Callable[..., tuple[BranchService, FixtureCommitInteractor]]:
    """
    Provide a factory for branch services over replayed commit output.

    Keyword arguments are passed to FixtureCommitInteractor.

    Returns:
        A callable returning (service, commit interactor)
    """

    def make(**fixtures: str) -> tuple[BranchService, FixtureCommitInteractor]:
        commit_interactor = FixtureCommitInteractor(**fixtures)
        service = BranchService(FixtureBranchInteractor(), CommitService(commit_interactor))
        return service, commit_interactor

    return make


@pytest.fixture
def branch_interactor() -> FixtureBranchInteractor:
    return FixtureBranchInteractor()


@pytest.fixture
def commit_interactor() -> FixtureCommitInteractor:
    return FixtureCommitInteractor()


@pytest.fixture
def commit_service(commit_interactor: FixtureCommitInteractor) -> CommitService:
    return CommitService(commit_interactor)


@pytest.fixture
def branch_service(
    branch_interactor: FixtureBranchInteractor, commit_service: CommitService
) -> BranchService:
    return BranchService(branch_interactor, commit_service)


@pytest.fixture
def remote_service() -> RemoteService:
    return RemoteService(FixtureRemoteInteractor())


@pytest.fixture
def make_remote_service():
    """Build a RemoteService replaying the named ``git remote -v`` fixture."""

    def _make(fixture: str = "remotes") -> RemoteService:
        return RemoteService(FixtureRemoteInteractor(fixture))

    return _make


def _git(*args: str, cwd: Path) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture
def temp_git_repo(tmp_path: Path) -> Path:
    """
    Create a temporary git repository with a bare remote named origin.

    Sets up:
    - Bare repository at <tmp>/origin.git
    - Working repository at <tmp>/work on branch develop with one commit
    - develop pushed to origin

    Returns:
        Path to the working repository root
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    bare = tmp_path / "origin.git"
    work = tmp_path / "work"
    work.mkdir()

    _git("init", "--bare", str(bare), cwd=tmp_path)
    _git("init", cwd=work)
    _git("checkout", "-b", "develop", cwd=work)

    # Configure git user for commits
    _git("config", "user.email", "test@example.com", cwd=work)
    _git("config", "user.name", "Test User", cwd=work)
    _git("config", "commit.gpgsign", "false", cwd=work)

    _git("commit", "--allow-empty", "-m", "Initial commit", cwd=work)
    _git("remote", "add", "origin", str(bare), cwd=work)
    _git("push", "-u", "origin", "develop", cwd=work)

    return work


@pytest.fixture
def git_commit(temp_git_repo: Path) -> Callable[..., None]:
    """
    Provide a helper function to add empty commits.

    Returns:
        A callable that adds ``count`` commits to the checked-out branch
    """

    def commit(message: str = "Update", count: int = 1) -> None:
        for i in range(count):
            _git("commit", "--allow-empty", "-m", f"{message} {i + 1}", cwd=temp_git_repo)

    return commit


@pytest.fixture
def git() -> Callable[..., str]:
    """Provide the raw git runner used to shape test repositories."""
    return _git
