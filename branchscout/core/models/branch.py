"""
Branch domain models.

A branch is a name plus the source it lives in: the local repository or
a specific remote. Sources are a tagged union; their textual grammar
(``"local"`` / ``"remote <name> <url>"``) is only spoken by
parse_source() and the ``raw_value`` properties.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal

from pydantic import Field, field_validator, model_validator

from ..exceptions import NamingError
from .base import ImmutableModel
from .remote import Remote

_INVALID_CHAR_RE = re.compile(r"[\s\x00-\x1f\x7f~^:?*\[\\]")


class LocalSource(ImmutableModel):
    """Branches of the local repository."""

    kind: Literal["local"] = "local"

    @property
    def raw_value(self) -> str:
        return "local"


class RemoteSource(ImmutableModel):
    """Branches tracked from a remote."""

    kind: Literal["remote"] = "remote"
    remote: Remote

    @property
    def raw_value(self) -> str:
        return f"remote {self.remote.raw_value}"


Source = Annotated[LocalSource | RemoteSource, Field(discriminator="kind")]

LOCAL = LocalSource()


def parse_source(raw_value: str) -> LocalSource | RemoteSource | None:
    """
    Parse a raw source value.

    ``"local"`` may be followed by fields, which are ignored. ``"remote"``
    must be followed by exactly a remote name and URL. Any other shape
    yields None.

    Examples:
        "local"                                   -> LocalSource
        "local origin https://host/repo.git"      -> LocalSource
        "remote origin https://host/repo.git"     -> RemoteSource
        "remote origin"                           -> None
        "localandsomething ..."                   -> None
    """
    fields = raw_value.split()
    if not fields:
        return None
    if fields[0] == "local":
        return LOCAL
    if fields[0] == "remote" and len(fields) == 3:
        remote = Remote.parse(f"{fields[1]} {fields[2]}")
        if remote is None:
            return None
        return RemoteSource(remote=remote)
    return None


def remote_prefixes(remote_name: str) -> tuple[str, ...]:
    """Qualifiers git puts in front of a remote branch name, longest first."""
    return (
        f"refs/remotes/{remote_name}/",
        f"remotes/{remote_name}/",
        f"{remote_name}/",
    )


def _remote_name(source: Any) -> str | None:
    """Remote name of a source given as a model or as unvalidated input."""
    if isinstance(source, RemoteSource):
        return source.remote.name
    if isinstance(source, dict) and source.get("kind") == "remote":
        remote = source.get("remote")
        name = remote.get("name") if isinstance(remote, dict) else getattr(remote, "name", None)
        return name if isinstance(name, str) else None
    return None


def validate_branch_name(name: str) -> None:
    """
    Check a branch name against the characters and shapes git accepts.

    Raises:
        NamingError: If the name is empty, contains whitespace, control
            characters, a backslash or any of ``~^:?*[``, or breaks a
            ref-format rule (``..``, ``//``, ``@{``, ``.lock`` suffix,
            dot-led component, ...).
    """
    if not name or _INVALID_CHAR_RE.search(name):
        raise NamingError("Branch name contains invalid characters", name=name)
    if (
        name.startswith(("-", "/"))
        or name.endswith(("/", ".", ".lock"))
        or ".." in name
        or "//" in name
        or "@{" in name
        or name == "@"
        or any(part.startswith(".") for part in name.split("/"))
    ):
        raise NamingError("Branch name is not a valid ref name", name=name)


class Branch(ImmutableModel):
    """
    A branch and the source it belongs to.

    For a remote source, a leading ``<remote>/``, ``remotes/<remote>/`` or
    ``refs/remotes/<remote>/`` is stripped from the name so that
    ``full_name`` never qualifies twice. Local names are kept verbatim.
    """

    name: str
    source: Source = LOCAL

    @model_validator(mode="before")
    @classmethod
    def strip_remote_qualifier(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        name = data.get("name")
        remote_name = _remote_name(data.get("source"))
        if isinstance(name, str) and remote_name:
            for prefix in remote_prefixes(remote_name):
                if name.startswith(prefix):
                    data = {**data, "name": name[len(prefix) :]}
                    break
        return data

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        validate_branch_name(v)
        return v

    @property
    def full_name(self) -> str:
        if isinstance(self.source, RemoteSource):
            return f"{self.source.remote.name}/{self.name}"
        return self.name

    def on(self, source: LocalSource | RemoteSource) -> Branch:
        """Return the same-named branch in another source."""
        return Branch(name=self.name, source=source)

    def __str__(self) -> str:
        return self.full_name
