"""
Remote queries.
"""

from __future__ import annotations

from ...core.di import resolve_or_default
from ...core.exceptions import RemoteNotFoundError
from ...core.interfaces.git import IRemoteInteractor
from ...core.interfaces.logger import ILogger
from ...core.models.remote import Remote
from ..logging import NullLogger


class RemoteService:
    """Lists the remotes configured in a repository."""

    def __init__(self, interactor: IRemoteInteractor, logger: ILogger | None = None) -> None:
        self._interactor = interactor
        self._logger = logger or resolve_or_default(ILogger, NullLogger)

    def get_all(self, path: str = "") -> list[Remote]:
        """
        Get every configured remote, once each, in listing order.

        Lines whose name/URL pair is not a valid remote are skipped.
        """
        remotes: list[Remote] = []
        for line in self._interactor.get_all_remotes(path).splitlines():
            fields = line.split()
            if len(fields) < 2:
                continue
            remote = Remote.parse(f"{fields[0]} {fields[1]}")
            if remote is None:
                self._logger.debug("Skipping unparseable remote line: %r", line)
                continue
            if remote not in remotes:
                remotes.append(remote)
        return remotes

    def get(self, name: str, path: str = "") -> Remote:
        """
        Get a remote by name.

        Raises:
            RemoteNotFoundError: If no remote has that name
        """
        for remote in self.get_all(path):
            if remote.name == name:
                return remote
        raise RemoteNotFoundError(f"No remote named '{name}'", remote=name)
