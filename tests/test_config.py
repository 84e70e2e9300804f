"""
Tests for branchscout configuration loading and the config helpers.

Tests verify:
- Settings load from .branchscout.toml, pyproject.toml and the environment
- Defaults in CONFIGURABLE_KEYS match Pydantic model defaults
- config_set validates keys and values and writes only non-defaults
- Config round-trip (save -> load) preserves values
"""

from pathlib import Path

import pytest

from branchscout.config import (
    CONFIGURABLE_KEYS,
    _get_default_config,
    config_get,
    config_set,
    load_config,
    save_config,
    validate_key_path,
)
from branchscout.core.exceptions import ConfigFileError, ConfigValidationError
from branchscout.core.settings import find_config_file, load_settings


class TestLoadSettings:
    """Tests for settings sources and their priority."""

    def test_defaults_without_config_file(self, tmp_path: Path) -> None:
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.git.remote == "origin"
        assert settings.git.default_branch == "develop"
        assert settings.parent.tie_policy == "fallback"
        assert settings.parent.lookback_days is None

    def test_branchscout_toml(self, tmp_path: Path) -> None:
        (tmp_path / ".branchscout.toml").write_text(
            '[git]\nremote = "upstream"\n\n[parent]\ntie_policy = "latest"\nlookback_days = 30\n'
        )
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.git.remote == "upstream"
        assert settings.parent.tie_policy == "latest"
        assert settings.parent.lookback_days == 30
        assert settings.config_file == str(tmp_path / ".branchscout.toml")

    def test_found_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / ".branchscout.toml").write_text('[git]\ndefault_branch = "main"\n')
        nested = tmp_path / "src" / "pkg"
        nested.mkdir(parents=True)
        assert load_settings(start_dir=str(nested)).git.default_branch == "main"

    def test_pyproject_tool_section(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "demo"\n\n[tool.branchscout.git]\ndefault_branch = "main"\n'
        )
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.git.default_branch == "main"
        assert find_config_file(str(tmp_path)) == tmp_path / "pyproject.toml"

    def test_pyproject_without_section_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n')
        sub = tmp_path / "sub"
        sub.mkdir()
        assert find_config_file(str(sub)) != tmp_path / "pyproject.toml"

    def test_environment_overrides_file(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / ".branchscout.toml").write_text('[git]\nremote = "upstream"\n')
        monkeypatch.setenv("BRANCHSCOUT_GIT__REMOTE", "fork")
        assert load_settings(start_dir=str(tmp_path)).git.remote == "fork"

    def test_invalid_toml_reported(self, tmp_path: Path) -> None:
        (tmp_path / ".branchscout.toml").write_text("[git\nremote = \n")
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.git.remote == "origin"
        assert settings.config_error is not None


class TestConfigurableKeys:
    """CONFIGURABLE_KEYS must agree with the Pydantic models."""

    def test_defaults_match_models(self) -> None:
        defaults = _get_default_config()
        for key, info in CONFIGURABLE_KEYS.items():
            section, name = key.split(".")
            assert defaults[section][name] == info["default"], key

    def test_every_model_field_is_configurable(self) -> None:
        defaults = _get_default_config()
        keys = {f"{section}.{name}" for section, values in defaults.items() for name in values}
        assert keys == set(CONFIGURABLE_KEYS)


class TestValidateKeyPath:
    """Tests for dotted key path validation."""

    @pytest.mark.parametrize("key", ["git", "git.remote", " parent.tie_policy "])
    def test_valid(self, key: str) -> None:
        assert validate_key_path(key) == key.strip()

    @pytest.mark.parametrize("key", ["", ".", "git.", ".git", "git..remote", "git remote"])
    def test_malformed(self, key: str) -> None:
        with pytest.raises(ConfigValidationError):
            validate_key_path(key)


class TestConfigSet:
    """Tests for config_set and config_get."""

    def test_set_and_get(self, tmp_path: Path) -> None:
        config_path, value = config_set("parent.tie_policy", "latest", start_dir=str(tmp_path))
        assert config_path == tmp_path / ".branchscout.toml"
        assert value == "latest"
        assert config_get("parent.tie_policy", start_dir=str(tmp_path)) == "latest"

    def test_only_non_defaults_written(self, tmp_path: Path) -> None:
        config_set("git.remote", "upstream", start_dir=str(tmp_path))
        content = (tmp_path / ".branchscout.toml").read_text()
        assert '[git]\nremote = "upstream"' in content
        assert "default_branch" not in content
        assert "[logging]" not in content

    def test_typed_values(self, tmp_path: Path) -> None:
        _, timeout = config_set("git.timeout", "60", start_dir=str(tmp_path))
        _, console = config_set("logging.console", "yes", start_dir=str(tmp_path))
        assert timeout == 60
        assert console is True
        config = load_config(start_dir=str(tmp_path))
        assert config["git"]["timeout"] == 60
        assert config["logging"]["console"] is True

    def test_unset_lookback(self, tmp_path: Path) -> None:
        config_set("parent.lookback_days", "14", start_dir=str(tmp_path))
        _, value = config_set("parent.lookback_days", "", start_dir=str(tmp_path))
        assert value is None
        assert config_get("parent.lookback_days", start_dir=str(tmp_path)) is None

    def test_get_section(self, tmp_path: Path) -> None:
        section = config_get("git", start_dir=str(tmp_path))
        assert section["remote"] == "origin"

    def test_get_unknown_key(self, tmp_path: Path) -> None:
        assert config_get("git.nope", start_dir=str(tmp_path)) is None

    @pytest.mark.parametrize(
        "key,value",
        [
            ("git", "x"),
            ("git.nope", "x"),
            ("git..remote", "x"),
            ("git.timeout", "soon"),
            ("git.timeout", "0"),
            ("logging.console", "maybe"),
            ("logging.level", "loud"),
            ("parent.tie_policy", "random"),
            ("pull_request.web_url", "github.com"),
        ],
    )
    def test_rejected(self, tmp_path: Path, key: str, value: str) -> None:
        with pytest.raises(ConfigValidationError):
            config_set(key, value, start_dir=str(tmp_path))
        assert not (tmp_path / ".branchscout.toml").exists()


class TestSaveConfig:
    """Tests for save_config round-trips."""

    def test_round_trip(self, tmp_path: Path) -> None:
        config = _get_default_config()
        config["git"]["default_branch"] = "main"
        config["pull_request"]["web_url"] = "https://gitlab.example.com"
        config["parent"]["lookback_days"] = 90

        config_path = tmp_path / ".branchscout.toml"
        save_config(config, config_path)

        loaded = load_config(config_path=config_path)
        assert loaded["git"]["default_branch"] == "main"
        assert loaded["pull_request"]["web_url"] == "https://gitlab.example.com"
        assert loaded["parent"]["lookback_days"] == 90

    def test_quotes_escaped(self, tmp_path: Path) -> None:
        config = _get_default_config()
        config["pull_request"]["ticket_separator"] = '"'

        config_path = tmp_path / ".branchscout.toml"
        save_config(config, config_path)

        loaded = load_config(config_path=config_path)
        assert loaded["pull_request"]["ticket_separator"] == '"'

    def test_unwritable_path(self, tmp_path: Path) -> None:
        config = _get_default_config()
        config["git"]["remote"] = "upstream"
        with pytest.raises(ConfigFileError) as exc_info:
            save_config(config, tmp_path / "missing" / ".branchscout.toml")
        assert exc_info.value.context["file_path"].endswith(".branchscout.toml")
