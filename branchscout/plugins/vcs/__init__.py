"""
Git command interactors.

Provides the subprocess-backed implementations of the interactor seam.
"""

from .base import BaseGitInteractor
from .git import GitBranchInteractor, GitCommitInteractor, GitRemoteInteractor

__all__ = [
    "BaseGitInteractor",
    "GitBranchInteractor",
    "GitCommitInteractor",
    "GitRemoteInteractor",
]
