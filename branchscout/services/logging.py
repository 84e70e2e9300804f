"""
stdlib-backed diagnostic logging for branchscout.

Diagnostics go to stderr when enabled and to a size-rotated file under
~/.branchscout. The handlers carry the level threshold; the underlying
stdlib logger passes every record through to them.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class BranchscoutLogger(ILogger):
    """
    ILogger writing to stderr and/or ~/.branchscout/branchscout.log.

    Args:
        name: stdlib logger name
        level: debug, info, warning or error (anything else means warning)
        console_enabled: Write to stderr
        file_enabled: Write to log_file, rotated at 10 MB with 3 backups
        log_file: Log file location (default: LOG_FILE_PATH)
    """

    LOG_FILE_PATH = Path.home() / ".branchscout" / "branchscout.log"
    MAX_FILE_SIZE = 10 * 1024 * 1024
    BACKUP_COUNT = 3

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "branchscout",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = True,
        log_file: Path | None = None,
    ) -> None:
        self.log_file = log_file or self.LOG_FILE_PATH
        self._handlers: list[logging.Handler] = []

        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        for stale in list(self._logger.handlers):
            stale.close()
            self._logger.removeHandler(stale)
        self._logger.propagate = False

        if console_enabled:
            self._attach(logging.StreamHandler(sys.stderr))
        if file_enabled:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            self._attach(
                RotatingFileHandler(
                    self.log_file, maxBytes=self.MAX_FILE_SIZE, backupCount=self.BACKUP_COUNT
                )
            )
        self.set_level(level)

    @classmethod
    def from_config(cls, config: LoggingConfig, verbose: bool = False) -> "BranchscoutLogger":
        """Build from the [logging] section; verbose forces debug output on stderr."""
        return cls(
            level="debug" if verbose else config.level,
            console_enabled=verbose or config.console,
            file_enabled=config.file,
        )

    def _attach(self, handler: logging.Handler) -> None:
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        threshold = self.LEVEL_MAP.get(level.lower(), logging.WARNING)
        for handler in self._handlers:
            handler.setLevel(threshold)


class NullLogger(ILogger):
    """Discards everything; the fallback when no logger is registered."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
