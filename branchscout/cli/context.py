"""
Click context extension for branchscout CLI.

Provides BranchscoutContext dataclass that holds the settings and the
services commands need, passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path

from ..core.models.branch import Branch
from ..core.settings import BranchscoutSettings, load_settings
from ..services.vcs import BranchService, RemoteService


@dataclass
class BranchscoutContext:
    """Extended context passed through Click command chain.

    It is created once at CLI startup, or handed in by the caller (tests
    pass one built on fixture-backed interactors via ``obj=``).

    Attributes:
        cwd: Directory git commands run in
        settings: Loaded configuration
        branches: Branch queries and parent resolution
        remotes: Remote queries
    """

    cwd: Path
    settings: BranchscoutSettings
    branches: BranchService
    remotes: RemoteService

    @classmethod
    def create(cls, cwd: Path | None = None, verbose: bool = False) -> BranchscoutContext:
        """Create a BranchscoutContext for the current environment.

        Loads settings starting at cwd and bootstraps the service
        container with the git-backed services.

        Args:
            cwd: Working directory override (defaults to Path.cwd())
            verbose: Force debug logging to stderr

        Returns:
            Configured BranchscoutContext instance
        """
        from ..core.bootstrap import bootstrap

        if cwd is None:
            cwd = Path.cwd()

        settings = load_settings(start_dir=str(cwd))
        container = bootstrap(settings, verbose=verbose)

        return cls(
            cwd=cwd,
            settings=settings,
            branches=container.resolve(BranchService),
            remotes=container.resolve(RemoteService),
        )

    @property
    def path(self) -> str:
        """Repository path handed to the git interactors."""
        return str(self.cwd)

    def default_branch(self, name: str | None = None) -> Branch:
        """The local fallback branch, from the option or the config."""
        return Branch(name=name or self.settings.git.default_branch)

    def lookback(self, days: int | None = None) -> datetime | None:
        """Cutoff for commit queries, from the option or the config."""
        if days is None:
            days = self.settings.parent.lookback_days
        if not days:
            return None
        return datetime.now(timezone.utc) - timedelta(days=days)
