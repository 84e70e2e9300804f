"""
Interface definitions for branchscout's pluggable services.

These abstract classes define the contracts that implementations must
follow, so the domain services never depend on how git is invoked.
"""

from .git import IBranchInteractor, ICommitInteractor, IRemoteInteractor
from .logger import ILogger

__all__ = [
    "IBranchInteractor",
    "ICommitInteractor",
    "ILogger",
    "IRemoteInteractor",
]
