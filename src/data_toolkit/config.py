"""
Configuration Management - Centralized defaults for the data toolkit

Helpers that take optional arguments (random string length and sets,
coordinate labels, tree value rewrites) fall back to the values held here.
Each helper reads, and is validated against, only its own section, so an
invalid logging setting never breaks random_string or path_to_tree.

License: MIT
"""

import os
from typing import Dict, Any, Optional, List, Tuple
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
import logging

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


@dataclass
class RandomConfig:
    """Defaults for random string generation."""

    length: int = 8
    sets: List[str] = field(default_factory=lambda: ["aZ"])
    allow_duplicates: bool = True


@dataclass
class GeoConfig:
    """Defaults for coordinate formatting."""

    latitude_labels: Tuple[str, str] = ("N", "S")
    longitude_labels: Tuple[str, str] = ("E", "W")
    seconds_precision: int = 2


@dataclass
class TreeConfig:
    """Defaults for path to tree conversion."""

    # Leaf values rewritten while building a tree, e.g. validation messages
    value_rewrites: Dict[str, str] = field(
        default_factory=lambda: {"is not a string": "missing"}
    )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    format_type: str = "simple"
    log_file: Optional[str] = None
    max_file_size: int = 10485760  # 10MB
    backup_count: int = 5


@dataclass
class ToolkitConfig:
    """Main toolkit configuration."""

    environment: str = "development"

    random: RandomConfig = field(default_factory=RandomConfig)
    geo: GeoConfig = field(default_factory=GeoConfig)
    tree: TreeConfig = field(default_factory=TreeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigManager:
    """
    Configuration manager for loading and validating configuration.

    Problems found while loading are recorded against the section they belong
    to. load_config() reports all of them, get_section() only those of the
    section asked for.
    """

    # Problems not tied to a single section, e.g. an unreadable file
    GLOBAL = "*"

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to a YAML configuration file (optional). When not
                given, the DATA_TOOLKIT_CONFIG environment variable is used.
        """
        self.config_path = config_path or os.getenv("DATA_TOOLKIT_CONFIG")
        self._config: Optional[ToolkitConfig] = None
        self._errors: Dict[str, List[str]] = {}

    def load_config(self) -> ToolkitConfig:
        """
        Load configuration from files and environment variables.

        Returns:
            ToolkitConfig instance

        Raises:
            ConfigurationError: If any section of the configuration is invalid
        """
        config = self._ensure_loaded()

        errors = [error for section_errors in self._errors.values() for error in section_errors]
        if errors:
            raise ConfigurationError(_format_errors(errors))

        return config

    def get_section(self, name: str) -> Any:
        """
        Get one section of the configuration, loading if necessary.

        Args:
            name: Section name, e.g. "random", "geo", "tree", "logging" or
                "environment"

        Returns:
            The section object (or value, for "environment")

        Raises:
            ConfigurationError: If the configuration file could not be read or
                this section is invalid
        """
        config = self._ensure_loaded()

        errors = self._errors.get(self.GLOBAL, []) + self._errors.get(name, [])
        if errors:
            raise ConfigurationError(_format_errors(errors))

        return getattr(config, name)

    def get_unvalidated_section(self, name: str) -> Any:
        """
        Get one section without checking it, for callers that validate the
        values they end up using themselves.
        """
        return getattr(self._ensure_loaded(), name)

    def _ensure_loaded(self) -> ToolkitConfig:
        if self._config is not None:
            return self._config

        errors: Dict[str, List[str]] = {}

        # Start with default configuration
        config = ToolkitConfig()

        # Load from file if specified
        if self.config_path and Path(self.config_path).exists():
            config = self._load_from_file(config, self.config_path, errors)

        # Override with environment variables
        config = self._load_from_env(config, errors)

        for section, section_errors in self._validate_config(config).items():
            errors.setdefault(section, []).extend(section_errors)

        self._config = config
        self._errors = errors
        logger.debug(f"Configuration loaded for environment: {config.environment}")

        return config

    def _load_from_file(
        self, config: ToolkitConfig, file_path: str, errors: Dict[str, List[str]]
    ) -> ToolkitConfig:
        """Load configuration from YAML file."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            errors.setdefault(self.GLOBAL, []).append(
                f"Error loading configuration from {file_path}: {e}"
            )
            return config

        if not isinstance(file_config, dict):
            errors.setdefault(self.GLOBAL, []).append(
                f"Configuration file {file_path} must contain a mapping"
            )
            return config

        self._update_config_from_dict(config, file_config, errors)
        logger.debug(f"Configuration loaded from file: {file_path}")

        return config

    def _load_from_env(self, config: ToolkitConfig, errors: Dict[str, List[str]]) -> ToolkitConfig:
        """Load configuration from environment variables."""

        config.environment = os.getenv("ENVIRONMENT", config.environment)

        # Integers, a bad value only affects its own section
        for section, attr, env_name in (
            ("random", "length", "RANDOM_LENGTH"),
            ("geo", "seconds_precision", "GEO_SECONDS_PRECISION"),
        ):
            raw = os.getenv(env_name)
            if raw is None:
                continue
            try:
                setattr(getattr(config, section), attr, int(raw))
            except ValueError:
                errors.setdefault(section, []).append(f"{env_name} must be an integer, got {raw!r}")

        # Random strings
        random_sets_env = os.getenv("RANDOM_SETS")
        if random_sets_env:
            config.random.sets = [s.strip() for s in random_sets_env.split(",") if s.strip()]

        config.random.allow_duplicates = (
            os.getenv("RANDOM_ALLOW_DUPLICATES", str(config.random.allow_duplicates)).lower()
            == "true"
        )

        # Logging
        config.logging.level = os.getenv("LOG_LEVEL", config.logging.level)
        config.logging.format_type = os.getenv("LOG_FORMAT", config.logging.format_type)
        config.logging.log_file = os.getenv("LOG_FILE", config.logging.log_file)

        return config

    def _update_config_from_dict(
        self, config: ToolkitConfig, config_dict: Dict[str, Any], errors: Dict[str, List[str]]
    ) -> None:
        """Update configuration from dictionary."""
        for section_name, section_config in config_dict.items():
            if not hasattr(config, section_name):
                logger.debug(f"Ignoring unknown configuration section: {section_name}")
                continue

            section_obj = getattr(config, section_name)
            if is_dataclass(section_obj) and isinstance(section_config, dict):
                for key, value in section_config.items():
                    if hasattr(section_obj, key):
                        if key.endswith("_labels") and isinstance(value, list):
                            value = tuple(value)
                        setattr(section_obj, key, value)
            elif is_dataclass(section_obj):
                errors.setdefault(section_name, []).append(
                    f"Configuration section {section_name} must be a mapping"
                )
            else:
                setattr(config, section_name, section_config)

    def _validate_config(self, config: ToolkitConfig) -> Dict[str, List[str]]:
        """Validate configuration values, returning the problems per section."""
        return {
            "random": validate_random_config(config.random),
            "geo": validate_geo_config(config.geo),
            "tree": validate_tree_config(config.tree),
            "logging": validate_logging_options(config.logging.level, config.logging.format_type),
        }

    def get_config(self) -> ToolkitConfig:
        """Get the current configuration, loading if necessary."""
        return self.load_config()

    def reload_config(self) -> ToolkitConfig:
        """Reload configuration from sources."""
        self._config = None
        self._errors = {}
        return self.load_config()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        config = self.get_config()

        def dataclass_to_dict(obj):
            if is_dataclass(obj):
                return {f.name: dataclass_to_dict(getattr(obj, f.name)) for f in fields(obj)}
            return obj

        return dataclass_to_dict(config)


def _format_errors(errors: List[str]) -> str:
    return "Configuration validation errors:\n" + "\n".join(f"- {error}" for error in errors)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_random_config(section: RandomConfig) -> List[str]:
    """Return the problems found in the random section."""
    errors = []

    if not _is_int(section.length) or section.length < 0:
        errors.append("Random string length must be a non-negative integer")

    if not section.sets or not isinstance(section.sets, (str, list, tuple)):
        errors.append("Random string sets must name at least one set")

    return errors


def validate_geo_config(section: GeoConfig) -> List[str]:
    """Return the problems found in the geo section."""
    errors = []

    for name in ("latitude_labels", "longitude_labels"):
        labels = getattr(section, name)
        if (
            not isinstance(labels, (list, tuple))
            or len(labels) != 2
            or not all(isinstance(label, str) for label in labels)
        ):
            errors.append(f"Geo {name} must be a pair of strings")

    if not _is_int(section.seconds_precision) or section.seconds_precision < 0:
        errors.append("Geo seconds precision must be a non-negative integer")

    return errors


def validate_tree_config(section: TreeConfig) -> List[str]:
    """Return the problems found in the tree section."""
    if not isinstance(section.value_rewrites, dict):
        return ["Tree value rewrites must be a mapping"]
    return []


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_LOG_FORMATS = ["simple", "detailed", "json"]


def validate_logging_options(level: Any, format_type: Any) -> List[str]:
    """Return the problems found in a logging level and format."""
    errors = []

    if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
        errors.append(f"Log level must be one of: {', '.join(VALID_LOG_LEVELS)}, got {level!r}")

    if not isinstance(format_type, str) or format_type.lower() not in VALID_LOG_FORMATS:
        errors.append(
            f"Log format must be one of: {', '.join(VALID_LOG_FORMATS)}, got {format_type!r}"
        )

    return errors


# Global configuration manager instance
_config_manager = None


def get_config_manager(config_path: Optional[str] = None) -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager(config_path)
    return _config_manager


def get_config() -> ToolkitConfig:
    """Get the current toolkit configuration, validating every section."""
    return get_config_manager().get_config()


def get_section(name: str) -> Any:
    """Get one section of the toolkit configuration, validating only that section."""
    return get_config_manager().get_section(name)


def reset_config() -> None:
    """Drop the global configuration manager so the next access reloads it."""
    global _config_manager
    _config_manager = None
