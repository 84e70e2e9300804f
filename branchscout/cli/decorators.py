"""
Click decorators for branchscout CLI commands.

Provides:
- translate_errors: Reports branchscout errors as Click errors
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import BranchscoutException

F = TypeVar("F", bound=Callable[..., Any])


def translate_errors(f: F) -> F:
    """Decorator to turn branchscout exceptions into Click errors.

    Usage:
        @cli.command()
        @click.pass_obj
        @translate_errors
        def current(ctx: BranchscoutContext):
            ...

    Errors are logged at debug level (with their context) before being
    shown, so ``--verbose`` reveals the failing git command.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except BranchscoutException as e:
            from ..core.di import resolve_or_default
            from ..core.interfaces.logger import ILogger
            from ..services.logging import NullLogger

            resolve_or_default(ILogger, NullLogger).debug("Command failed: %s", e)
            raise click.ClickException(str(e)) from e

    return wrapper  # type: ignore[return-value]
