"""
Core infrastructure for branchscout.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interface definitions for the git interactor seam
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    BranchscoutConfigError,
    BranchscoutException,
    BranchscoutGitError,
    CommandExecutionError,
    ConfigFileError,
    ConfigValidationError,
    InvalidArgumentError,
    NamingError,
    NumberNotFoundError,
    RemoteNotFoundError,
)

__all__ = [
    "BranchscoutConfigError",
    "BranchscoutException",
    "BranchscoutGitError",
    "CommandExecutionError",
    "ConfigFileError",
    "ConfigValidationError",
    "InvalidArgumentError",
    "NamingError",
    "NumberNotFoundError",
    "RemoteNotFoundError",
    "ServiceContainer",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
]
