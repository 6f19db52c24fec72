"""
Unit Tests for Configuration Management

Tests defaults, YAML file loading, environment overrides and validation.
"""

import pytest

from data_toolkit.config import (
    ConfigManager,
    ToolkitConfig,
    get_config,
    get_config_manager,
    get_section,
    reset_config,
)
from data_toolkit.exceptions import ConfigurationError


class TestConfigManager:
    """Test cases for ConfigManager."""

    def test_defaults(self):
        config = ConfigManager().load_config()

        assert isinstance(config, ToolkitConfig)
        assert config.environment == "development"
        assert config.random.length == 8
        assert config.random.sets == ["aZ"]
        assert config.random.allow_duplicates is True
        assert config.geo.latitude_labels == ("N", "S")
        assert config.geo.longitude_labels == ("E", "W")
        assert config.tree.value_rewrites == {"is not a string": "missing"}
        assert config.logging.level == "INFO"

    def test_load_is_cached(self):
        manager = ConfigManager()
        assert manager.load_config() is manager.get_config()

    def test_reload(self, monkeypatch):
        manager = ConfigManager()
        first = manager.load_config()
        monkeypatch.setenv("RANDOM_LENGTH", "3")

        second = manager.reload_config()

        assert second is not first
        assert second.random.length == 3

    def test_from_file(self, config_file):
        config = ConfigManager(str(config_file)).load_config()

        assert config.random.length == 12
        assert config.random.sets == ["10", "AZ*"]
        assert config.geo.latitude_labels == ("North", "South")
        assert config.geo.longitude_labels == ("E", "W")
        assert config.geo.seconds_precision == 1
        assert config.tree.value_rewrites == {}

    def test_file_from_environment(self, config_file, monkeypatch):
        monkeypatch.setenv("DATA_TOOLKIT_CONFIG", str(config_file))
        assert ConfigManager().load_config().random.length == 12

    def test_missing_file_ignored(self, tmp_path):
        config = ConfigManager(str(tmp_path / "nope.yml")).load_config()
        assert config.random.length == 8

    def test_environment_overrides_file(self, config_file, monkeypatch):
        monkeypatch.setenv("RANDOM_LENGTH", "20")
        monkeypatch.setenv("RANDOM_SETS", "az, 10")
        monkeypatch.setenv("RANDOM_ALLOW_DUPLICATES", "false")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = ConfigManager(str(config_file)).load_config()

        assert config.random.length == 20
        assert config.random.sets == ["az", "10"]
        assert config.random.allow_duplicates is False
        assert config.logging.level == "debug"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("random: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Error loading configuration"):
            ConfigManager(str(path)).load_config()

    def test_yaml_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yml"
        path.write_text("- one\n- two\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            ConfigManager(str(path)).load_config()

    def test_invalid_integer_env(self, monkeypatch):
        monkeypatch.setenv("RANDOM_LENGTH", "eight")
        with pytest.raises(ConfigurationError):
            ConfigManager().load_config()

    def test_validation_collects_errors(self, tmp_path, monkeypatch):
        path = tmp_path / "invalid.yml"
        path.write_text(
            "random:\n  length: -1\ngeo:\n  latitude_labels: ['N']\n", encoding="utf-8"
        )
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(str(path)).load_config()

        message = str(exc_info.value)
        assert "length must be a non-negative integer" in message
        assert "latitude_labels must be a pair" in message
        assert "Log level must be one of" in message

    def test_to_dict(self):
        data = ConfigManager().to_dict()

        assert data["random"]["length"] == 8
        assert data["logging"]["format_type"] == "simple"


class TestGlobalConfig:
    """Test cases for the module level accessors."""

    def test_singleton(self):
        assert get_config_manager() is get_config_manager()
        assert get_config() is get_config()

    def test_reset(self):
        first = get_config()
        reset_config()
        assert get_config() is not first


class TestConfigSections:
    """Test cases for reading one section at a time."""

    def test_get_section(self, config_file):
        manager = ConfigManager(str(config_file))

        assert manager.get_section("random").length == 12
        assert manager.get_section("geo").seconds_precision == 1
        assert manager.get_section("environment") == "development"

    def test_bad_logging_only_fails_logging(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warn")
        monkeypatch.setenv("LOG_FORMAT", "xml")
        manager = ConfigManager()

        assert manager.get_section("random").length == 8
        assert manager.get_section("tree").value_rewrites == {"is not a string": "missing"}
        with pytest.raises(ConfigurationError, match="Log level must be one of"):
            manager.get_section("logging")
        with pytest.raises(ConfigurationError, match="Log format must be one of"):
            manager.load_config()

    def test_bad_integer_only_fails_its_section(self, monkeypatch):
        monkeypatch.setenv("RANDOM_LENGTH", "eight")
        manager = ConfigManager()

        assert manager.get_section("geo").latitude_labels == ("N", "S")
        with pytest.raises(ConfigurationError, match="RANDOM_LENGTH must be an integer"):
            manager.get_section("random")

    def test_unreadable_file_fails_every_section(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("random: [unclosed\n", encoding="utf-8")
        manager = ConfigManager(str(path))

        for name in ("random", "geo", "tree", "logging"):
            with pytest.raises(ConfigurationError, match="Error loading configuration"):
                manager.get_section(name)

    def test_module_level_get_section(self, monkeypatch):
        monkeypatch.setenv("GEO_SECONDS_PRECISION", "0")
        assert get_section("geo").seconds_precision == 0

    def test_section_not_a_mapping(self, tmp_path):
        path = tmp_path / "flat.yml"
        path.write_text("random: 5\n", encoding="utf-8")
        manager = ConfigManager(str(path))

        assert manager.get_section("geo").seconds_precision == 2
        with pytest.raises(ConfigurationError, match="section random must be a mapping"):
            manager.get_section("random")
