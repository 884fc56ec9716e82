"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from lambda_app.config.defaults import get_default_config
from lambda_app.config.loader import CONFIG_FILENAME, ConfigLoader
from lambda_app.config.validation import ConfigValidator
from lambda_app.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.logging.level == "WARNING"
        assert config.logging.format_json is False
        assert config.shared_state.x == 10
        assert config.shared_state.y == 20


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        """Test config merging without a config file."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["logging"]["level"] == "WARNING"
        assert config["shared_state"] == {"x": 10, "y": 20}

    def test_merge_config_with_overrides(self, tmp_path: Path) -> None:
        """Test config merging with explicit overrides."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config({"logging": {"level": "DEBUG"}})

        assert config["logging"]["level"] == "DEBUG"
        # Other defaults should remain
        assert config["logging"]["include_timestamp"] is True

    def test_file_overrides_defaults(self, tmp_path: Path) -> None:
        """Test that YAML file values take precedence over defaults."""
        (tmp_path / CONFIG_FILENAME).write_text(
            "logging:\n  level: INFO\n  format_json: true\nshared_state:\n  x: 1\n"
        )
        config = ConfigLoader.create(tmp_path).load()

        assert config.logging.level == "INFO"
        assert config.logging.format_json is True
        assert config.shared_state.x == 1
        assert config.shared_state.y == 20

    def test_overrides_beat_file(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("logging:\n  level: INFO\n")
        config = ConfigLoader.create(tmp_path).load({"logging": {"level": "ERROR"}})
        assert config.logging.level == "ERROR"

    def test_empty_file(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert ConfigLoader.create(tmp_path).load() == get_default_config()

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("logging: [unclosed\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load()
        assert exc_info.value.source.endswith(CONFIG_FILENAME)

    def test_non_mapping_file_raises(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load()

    def test_invalid_values_raise_with_errors(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("logging:\n  level: LOUD\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load()
        assert [e.field for e in exc_info.value.errors] == ["logging.level"]


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_logging_params(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "debug", "format_json": True})
        assert len(errors) == 0

    def test_invalid_level(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "LOUD"})
        assert len(errors) == 1
        assert errors[0].field == "logging.level"

    def test_invalid_flag(self) -> None:
        errors = ConfigValidator.validate_logging_params({"include_caller": "yes"})
        assert len(errors) == 1
        assert errors[0].field == "logging.include_caller"

    def test_unknown_logging_key(self) -> None:
        errors = ConfigValidator.validate_logging_params({"colour": True})
        assert [e.field for e in errors] == ["logging.colour"]

    def test_shared_state_must_be_integers(self) -> None:
        errors = ConfigValidator.validate_shared_state_params({"x": "10", "y": True})
        assert [e.field for e in errors] == ["shared_state.x", "shared_state.y"]

    def test_unknown_section(self) -> None:
        errors = ConfigValidator.validate_config({"metrics": {}})
        assert [e.field for e in errors] == ["metrics"]

    def test_section_must_be_mapping(self) -> None:
        errors = ConfigValidator.validate_config({"logging": "INFO"})
        assert errors[0].field == "logging"
        assert errors[0].message == "Must be a mapping"
