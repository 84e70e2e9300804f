"""
Settings loading for branchscout.

Merges, highest priority first: explicit init values, BRANCHSCOUT_*
environment variables, the nearest TOML config file, model defaults.
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .models.config import (
    GitConfig,
    LoggingConfig,
    ParentConfig,
    PullRequestConfig,
)

CONFIG_FILE_NAME = ".branchscout.toml"
PYPROJECT_TABLE = ("tool", "branchscout")

# (explicit config path, search start directory) for the load in progress
_lookup: ContextVar[tuple[Path | None, str | None]] = ContextVar(
    "branchscout_config_lookup", default=(None, None)
)


def _get_logger():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def _pyproject_table(data: dict[str, Any]) -> dict[str, Any] | None:
    table: Any = data
    for key in PYPROJECT_TABLE:
        if not isinstance(table, dict) or key not in table:
            return None
        table = table[key]
    return table if isinstance(table, dict) else None


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find the nearest config file, walking up from start_dir (or cwd).

    In each directory a .branchscout.toml wins over a pyproject.toml, and
    a pyproject.toml only counts if it has a [tool.branchscout] table.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.exists():
            return candidate

        pyproject = directory / "pyproject.toml"
        if not pyproject.exists():
            continue
        try:
            with open(pyproject, "rb") as f:
                if _pyproject_table(tomllib.load(f)) is not None:
                    return pyproject
        except (tomllib.TOMLDecodeError, OSError) as e:
            _get_logger().debug("Skipping unreadable %s: %s", pyproject, e)

    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """
    Read the branchscout sections of a config file.

    Returns:
        Section tables keyed by section name, plus ``_config_file``; on a
        read or parse failure only ``_config_error`` is set
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        _get_logger().warning("Failed to parse config file %s: %s", path, e)
        return {"_config_error": f"Failed to parse config file: {e}"}
    except OSError as e:
        _get_logger().warning("Failed to read config file %s: %s", path, e)
        return {"_config_error": f"Failed to read config file: {e}"}

    if path.name == "pyproject.toml":
        data = _pyproject_table(data) or {}
    return {**data, "_config_file": str(path)}


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source backed by the nearest TOML config file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        path = config_path or find_config_file(start_dir)
        self.data: dict[str, Any] = read_config_file(path) if path else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self.data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return {k: v for k, v in self.data.items() if not k.startswith("_")}


class BranchscoutSettings(BaseSettings):
    """Branchscout configuration, one attribute per config section.

    Environment variables use ``BRANCHSCOUT_<SECTION>__<FIELD>``, e.g.
    ``BRANCHSCOUT_GIT__DEFAULT_BRANCH=main``.
    """

    model_config = {
        "env_prefix": "BRANCHSCOUT_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    git: GitConfig = GitConfig()
    parent: ParentConfig = ParentConfig()
    pull_request: PullRequestConfig = PullRequestConfig()
    logging: LoggingConfig = LoggingConfig()

    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        config_path, start_dir = _lookup.get()
        return (
            init_settings,
            env_settings,
            TomlConfigSource(settings_cls, config_path=config_path, start_dir=start_dir),
        )

    @property
    def config_file(self) -> str | None:
        """Path of the config file the settings were read from, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Why the config file could not be used, if it could not."""
        return self._config_error

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a nested dict keyed by section."""
        result: dict[str, Any] = {
            name: getattr(self, name).model_dump()
            for name in ("git", "parent", "pull_request", "logging")
        }
        if self._config_file:
            result["_config_file"] = self._config_file
        if self._config_error:
            result["_config_error"] = self._config_error
        return result


def load_settings(
    config_path: Path | None = None, start_dir: str | None = None
) -> BranchscoutSettings:
    """Load branchscout settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        BranchscoutSettings instance with all sources merged
    """
    token = _lookup.set((config_path, start_dir))
    try:
        settings = BranchscoutSettings()
    finally:
        _lookup.reset(token)

    path = config_path or find_config_file(start_dir)
    if path is not None:
        data = read_config_file(path)
        settings._config_file = data.get("_config_file")
        settings._config_error = data.get("_config_error")
    return settings
