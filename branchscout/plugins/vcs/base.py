"""
Base git interactor.

Runs git as a subprocess and turns every failure into a
CommandExecutionError carrying git's own message.
"""

from __future__ import annotations

import shlex
import subprocess

from ...core.di import resolve_or_default
from ...core.exceptions import CommandExecutionError
from ...core.interfaces.logger import ILogger
from ...services.logging import NullLogger


class BaseGitInteractor:
    """
    Shared subprocess plumbing for the git interactors.

    Args:
        git: git executable to invoke
        timeout: Seconds to wait for a single git command
        logger: Diagnostic logger (default: resolved from the container)
    """

    def __init__(
        self,
        git: str = "git",
        timeout: int = 30,
        logger: ILogger | None = None,
    ) -> None:
        self.git = git
        self.timeout = timeout
        self._logger = logger or resolve_or_default(ILogger, NullLogger)

    def _run(self, args: list[str], path: str) -> str:
        """
        Run a git command and return its stdout.

        Args:
            args: Arguments after the git executable
            path: Working directory ("" for the current directory)

        Raises:
            CommandExecutionError: If git is missing, times out or exits non-zero
        """
        cmd = [self.git, *args]
        cmd_str = shlex.join(cmd)
        self._logger.debug("Running %s in %s", cmd_str, path or ".")

        try:
            result = subprocess.run(
                cmd,
                cwd=path or None,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise CommandExecutionError(
                f"git executable not found: {self.git}", command=cmd_str, cause=e
            ) from e
        except subprocess.TimeoutExpired as e:
            raise CommandExecutionError(
                f"git command timed out after {self.timeout}s", command=cmd_str, cause=e
            ) from e

        if result.returncode != 0:
            message = result.stderr.strip() or f"git exited with status {result.returncode}"
            self._logger.debug("%s failed: %s", cmd_str, message)
            raise CommandExecutionError(message, command=cmd_str, exit_code=result.returncode)

        return result.stdout
