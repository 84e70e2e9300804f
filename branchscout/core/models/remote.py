"""
Git remote domain model.

A remote is identified by its name and URL. Its raw value is the
two-field form ``"<name> <url>"``, which is how remotes are exchanged
on the command line and inside a serialized branch source.
"""

from __future__ import annotations

from pydantic import ValidationError, field_validator

from ...utils.git_url import is_valid_git_url
from .base import ImmutableModel


class Remote(ImmutableModel):
    """A named git remote."""

    name: str
    url: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or any(ch.isspace() for ch in v):
            raise ValueError("Remote name must be a non-empty token without whitespace")
        return v

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not is_valid_git_url(v):
            raise ValueError(f"Not a valid git remote URL: {v!r}")
        return v

    @classmethod
    def parse(cls, raw_value: str) -> Remote | None:
        """Parse ``"<name> <url>"``; anything else yields None."""
        fields = raw_value.split()
        if len(fields) != 2:
            return None
        try:
            return cls(name=fields[0], url=fields[1])
        except ValidationError:
            return None

    @property
    def raw_value(self) -> str:
        return f"{self.name} {self.url}"

    def __str__(self) -> str:
        return self.raw_value
