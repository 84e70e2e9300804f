"""Configuration loading and management for branchscout."""

import re
from pathlib import Path
from typing import Any

from .core.exceptions import ConfigFileError, ConfigValidationError
from .core.settings import CONFIG_FILE_NAME, find_config_file, load_settings

# Dotted key paths: word segments separated by single dots
KEY_PATH_RE = re.compile(r"^\s*\w+(?:\.\w+)*\s*$")

VALID_TIE_POLICIES = {"fallback", "latest"}
VALID_LOG_LEVELS = {"debug", "info", "warning", "error"}

# Config keys that can be set via `branchscout config`
CONFIGURABLE_KEYS = {
    "git.remote": {
        "type": str,
        "default": "origin",
        "description": "Remote whose branches are candidates for the parent branch",
    },
    "git.default_branch": {
        "type": str,
        "default": "develop",
        "description": "Branch used when the parent branch is ambiguous",
    },
    "git.timeout": {
        "type": int,
        "default": 30,
        "description": "Seconds to wait for a single git command",
    },
    "parent.tie_policy": {
        "type": str,
        "default": "fallback",
        "description": "On tied commit counts: 'fallback' to the default branch, "
        "or 'latest' to prefer the only tied branch with recent commits",
    },
    "parent.lookback_days": {
        "type": int,
        "default": None,
        "description": "Only consider commits from the last N days (unset: all history)",
    },
    "pull_request.web_url": {
        "type": str,
        "default": "https://github.com",
        "description": "Web URL of the hosting service used to open pull requests",
    },
    "pull_request.ticket_separator": {
        "type": str,
        "default": "_",
        "description": "Separator between the ticket id and the rest of a branch name",
    },
    "logging.level": {
        "type": str,
        "default": "warning",
        "description": "Log level (debug, info, warning, error)",
    },
    "logging.console": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to stderr",
    },
    "logging.file": {
        "type": bool,
        "default": True,
        "description": "Output debug logs to ~/.branchscout/branchscout.log",
    },
}


def _get_default_config() -> dict:
    """Get default config from Pydantic models."""
    from .core.models.config import BranchscoutConfig

    return BranchscoutConfig().to_dict()


def get_nested(d: dict, key: str, default=None):
    """Get a nested key like 'git.remote'."""
    parts = key.split(".")
    for part in parts:
        if isinstance(d, dict) and part in d:
            d = d[part]
        else:
            return default
    return d


def set_nested(d: dict, key: str, value):
    """Set a nested key like 'git.remote'."""
    parts = key.split(".")
    for part in parts[:-1]:
        if part not in d:
            d[part] = {}
        d = d[part]
    d[parts[-1]] = value


def validate_key_path(key: str) -> str:
    """
    Check that a key is a dotted key path and return it stripped.

    Raises:
        ConfigValidationError: If the key is malformed
    """
    if not KEY_PATH_RE.match(key):
        raise ConfigValidationError("Malformed config key", key=key)
    return key.strip()


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict:
    """
    Load configuration from file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        Configuration dict with defaults applied
    """
    settings = load_settings(config_path=config_path, start_dir=start_dir)
    return settings.to_dict()


def get_config_path_for_write(start_dir: str | None = None) -> Path:
    """
    Get the path where config should be written.

    Prefers an existing .branchscout.toml, otherwise one in start_dir or cwd.
    """
    existing = find_config_file(start_dir)
    if existing and existing.name == CONFIG_FILE_NAME:
        return existing

    base = Path(start_dir) if start_dir else Path.cwd()
    return base / CONFIG_FILE_NAME


def _format_toml_value(val: Any) -> str:
    if isinstance(val, bool):
        return str(val).lower()
    if isinstance(val, str):
        escaped = val.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(val, list):
        return "[" + ", ".join(_format_toml_value(v) for v in val) + "]"
    return str(val)


def save_config(config: dict, config_path: Path):
    """
    Save configuration to a .branchscout.toml file.

    Only saves non-default values.

    Raises:
        ConfigFileError: If the file cannot be written
    """
    lines = []
    defaults = _get_default_config()

    for section, values in config.items():
        if section.startswith("_") or not isinstance(values, dict):
            continue
        section_lines = []
        for key, val in values.items():
            if val is None or val == defaults.get(section, {}).get(key):
                continue
            section_lines.append(f"{key} = {_format_toml_value(val)}")
        if section_lines:
            lines.append(f"[{section}]")
            lines.extend(section_lines)
            lines.append("")

    try:
        config_path.write_text("\n".join(lines))
    except OSError as e:
        raise ConfigFileError(
            f"Failed to write config file: {e}", file_path=str(config_path), cause=e
        ) from e


def config_get(key: str, start_dir: str | None = None):
    """Get a config value."""
    config = load_config(start_dir=start_dir)
    return get_nested(config, validate_key_path(key))


def _coerce(key: str, value: str) -> Any:
    key_type = CONFIGURABLE_KEYS[key]["type"]

    if key_type is bool:
        if value.lower() in ("true", "1", "yes", "on"):
            return True
        if value.lower() in ("false", "0", "no", "off"):
            return False
        raise ConfigValidationError(f"Invalid boolean value: {value}", key=key, value=value)

    if key_type is int:
        if value.strip() == "" and CONFIGURABLE_KEYS[key]["default"] is None:
            return None
        try:
            number = int(value)
        except ValueError as e:
            raise ConfigValidationError(
                f"Invalid integer value: {value}", key=key, value=value, cause=e
            ) from e
        if number < 1:
            raise ConfigValidationError("Value must be a positive integer", key=key, value=value)
        return number

    if key == "parent.tie_policy" and value not in VALID_TIE_POLICIES:
        raise ConfigValidationError(
            f"Invalid tie policy: {value}. "
            f"Valid policies: {', '.join(sorted(VALID_TIE_POLICIES))}",
            key=key,
            value=value,
        )
    if key == "logging.level" and value.lower() not in VALID_LOG_LEVELS:
        raise ConfigValidationError(
            f"Invalid log level: {value}. Valid levels: {', '.join(sorted(VALID_LOG_LEVELS))}",
            key=key,
            value=value,
        )
    if key == "pull_request.web_url" and not value.startswith(("http://", "https://")):
        raise ConfigValidationError(
            "Web URL must start with http:// or https://", key=key, value=value
        )
    return value.lower() if key == "logging.level" else value


def config_set(key: str, value: str, start_dir: str | None = None):
    """Set a config value and save to .branchscout.toml."""
    key = validate_key_path(key)

    if key not in CONFIGURABLE_KEYS:
        if any(k.startswith(f"{key}.") for k in CONFIGURABLE_KEYS):
            raise ConfigValidationError(
                f"'{key}' is a config section, not a key", key=key
            )
        raise ConfigValidationError(
            f"Unknown config key: {key}. Valid keys: {', '.join(CONFIGURABLE_KEYS.keys())}",
            key=key,
        )

    typed_value = _coerce(key, value)

    config = load_config(start_dir=start_dir)
    set_nested(config, key, typed_value)

    config_path = get_config_path_for_write(start_dir)
    save_config(config, config_path)

    return config_path, typed_value


def config_list():
    """List all configurable keys with descriptions."""
    return CONFIGURABLE_KEYS
