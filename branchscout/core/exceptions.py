"""
Custom exception hierarchy for branchscout.

Provides a structured exception hierarchy so that callers (mostly the CLI)
can tell naming problems, empty comparisons and failed git invocations apart.
"""

from __future__ import annotations


class BranchscoutException(Exception):
    """
    Base exception for all branchscout errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (branch names, commands, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class BranchscoutConfigError(BranchscoutException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(BranchscoutConfigError):
    """
    Error reading or writing a configuration file.

    Raised for TOML parsing errors, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(BranchscoutConfigError, ValueError):
    """
    Invalid or unknown configuration key or value.

    Inherits from ValueError so callers validating user input can
    catch it alongside other value errors.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Git Errors
# =============================================================================


class BranchscoutGitError(BranchscoutException):
    """Base class for errors raised by the branch/commit/remote model."""

    pass


class NamingError(BranchscoutGitError):
    """
    A branch name contains whitespace or characters git does not allow.

    Not a ValueError on purpose: raised from inside pydantic validators,
    it must reach the caller as-is instead of being folded into a
    ValidationError.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if name is not None:
            ctx["name"] = name
        super().__init__(message, context=ctx, cause=cause)


class NumberNotFoundError(BranchscoutGitError):
    """
    A commit count could not be produced.

    Raised when counting against an empty list of base branches, or when
    the count output does not hold one integer per base branch.
    """

    recoverable: bool = False


class CommandExecutionError(BranchscoutGitError):
    """
    A git command could not be run or exited with an error.

    The message carries git's own stderr; the core never retries.
    """

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        exit_code: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if command:
            ctx["command"] = command
        if exit_code is not None:
            ctx["exit_code"] = exit_code
        super().__init__(message, context=ctx, cause=cause)


class RemoteNotFoundError(BranchscoutGitError):
    """The requested remote is not configured in the repository."""

    def __init__(
        self,
        message: str,
        *,
        remote: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if remote:
            ctx["remote"] = remote
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidArgumentError(BranchscoutException, ValueError):
    """
    Invalid command-line argument or function parameter.

    Raised when user input fails validation.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)
