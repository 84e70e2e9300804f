"""
VCS services for branchscout.

Services:
- CommitService: commit counts and latest hashes between branches
- BranchService: current/all branches, ahead check, parent resolution
- RemoteService: configured remotes
"""

from .branch import BranchService
from .commit import CommitService
from .remote import RemoteService

__all__ = [
    "BranchService",
    "CommitService",
    "RemoteService",
]
