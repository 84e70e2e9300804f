"""
Diagnostic logger interface.

Services log through ILogger so that the CLI decides where diagnostics
end up: stderr under --verbose, the rotating log file, or nowhere.
Command results are printed with click.echo and never logged.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Leveled logger taking printf-style arguments, interpolated lazily."""

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def set_level(self, level: str) -> None:
        """Change the threshold to one of debug, info, warning, error."""
