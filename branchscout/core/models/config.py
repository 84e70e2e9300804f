"""
Configuration models.

Provides Pydantic models for branchscout configuration with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import BranchscoutBaseModel

# Type aliases
LogLevel = Literal["debug", "info", "warning", "error"]
TiePolicy = Literal["fallback", "latest"]


class ConfigBaseModel(BranchscoutBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class GitConfig(ConfigBaseModel):
    """Git invocation configuration section."""

    remote: str = "origin"
    default_branch: str = "develop"
    timeout: int = Field(default=30, gt=0)


class ParentConfig(ConfigBaseModel):
    """Parent branch resolution configuration section."""

    tie_policy: TiePolicy = "fallback"
    lookback_days: int | None = Field(default=None, ge=1)

    @field_validator("lookback_days", mode="before")
    @classmethod
    def empty_as_unset(cls, v: Any) -> Any:
        if v == "" or v == 0:
            return None
        return v


class PullRequestConfig(ConfigBaseModel):
    """Pull request URL composition configuration section."""

    web_url: str = "https://github.com"
    ticket_separator: str = "_"

    @field_validator("web_url", mode="before")
    @classmethod
    def validate_web_url(cls, v: str) -> str:
        """Validate and normalize the hosting service URL."""
        if not isinstance(v, str) or not v.startswith(("http://", "https://")):
            raise ValueError("Web URL must start with http:// or https://")
        return v.rstrip("/")


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = True


class BranchscoutConfig(ConfigBaseModel):
    """Complete branchscout configuration.

    This model represents the full configuration with all sections.
    It can be loaded from TOML files or constructed programmatically.
    """

    git: GitConfig = Field(default_factory=GitConfig)
    parent: ParentConfig = Field(default_factory=ParentConfig)
    pull_request: PullRequestConfig = Field(default_factory=PullRequestConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary.

        Returns:
            Configuration as nested dict
        """
        return self.model_dump()
