"""
Pydantic models for branchscout.

Value objects for the branch/remote domain plus configuration sections.
All models use Pydantic v2 with strict validation.
"""

from .base import BranchscoutBaseModel, ImmutableModel
from .branch import (
    LOCAL,
    Branch,
    LocalSource,
    RemoteSource,
    Source,
    parse_source,
    validate_branch_name,
)
from .config import (
    BranchscoutConfig,
    GitConfig,
    LoggingConfig,
    ParentConfig,
    PullRequestConfig,
)
from .remote import Remote

__all__ = [
    "LOCAL",
    "Branch",
    "BranchscoutBaseModel",
    "BranchscoutConfig",
    "GitConfig",
    "ImmutableModel",
    "LocalSource",
    "LoggingConfig",
    "ParentConfig",
    "PullRequestConfig",
    "Remote",
    "RemoteSource",
    "Source",
    "parse_source",
    "validate_branch_name",
]
