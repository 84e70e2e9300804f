"""
Click command implementations for branchscout CLI.

Each module corresponds to a branchscout command (e.g., parent.py
implements 'branchscout parent'). Commands are registered with the main
CLI group via register_commands() in branchscout.cli.
"""

from .ahead import ahead
from .branches import branches, current, remotes
from .config import config
from .open import open_pull_request
from .parent import parent

COMMANDS = [
    ahead,
    branches,
    config,
    current,
    open_pull_request,
    parent,
    remotes,
]

__all__ = [
    "COMMANDS",
    "ahead",
    "branches",
    "config",
    "current",
    "open_pull_request",
    "parent",
    "remotes",
]
