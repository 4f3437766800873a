"""Configuration loading for simrand generators."""

import configparser
import json
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import yaml

from simrand.configs.constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_SEEDS,
    REQUIRED_SECTION,
    SUPPORTED_CONFIG_EXTENSIONS,
)
from simrand.configs.errors import ConfigFileNotFoundError, ConfigParseError
from simrand.core.seeds import as_seed_input
from simrand.core.simple_random import SimpleRandom
from simrand.utils.logging_config import LOG_LEVELS, get_logger, set_log_level

logger = get_logger(__name__)

SeedSetting = tuple[int, int] | int | datetime | None


@dataclass(frozen=True)
class GeneratorConfig:
    """Immutable generator settings.

    ``seeds`` is a pair of words, a single word for the second seed, a
    timestamp, or ``None`` to seed from the clock.
    """

    seeds: SeedSetting = DEFAULT_SEEDS
    log_level: str = "WARNING"


class ConfigManager:
    """Load generator settings from INI, JSON or YAML files."""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration manager.

        Args:
            config_path: Path to configuration file, loaded immediately if given
        """
        self.config_path = config_path
        self._config: GeneratorConfig | None = None
        self._raw_config: dict[str, Any] = {}

        if config_path:
            self.load_config(config_path)

    def load_config(self, path: str) -> GeneratorConfig:
        """Load and validate configuration from file.

        Args:
            path: Path to configuration file

        Returns:
            Validated configuration object

        Raises:
            ConfigFileNotFoundError: If the file doesn't exist
            ConfigParseError: If the file format or a value is invalid
            InvalidSeedArgument: If a configured seed is negative
        """
        if not os.path.exists(path):
            raise ConfigFileNotFoundError(f"Configuration file not found: {path}")

        extension = os.path.splitext(path)[1].lower()
        if extension not in SUPPORTED_CONFIG_EXTENSIONS:
            raise ConfigParseError(f"Unsupported configuration file format: {path}")

        if extension == ".ini":
            self._raw_config = self._load_ini(path)
        elif extension == ".json":
            self._raw_config = self._load_json(path)
        else:
            self._raw_config = self._load_yaml(path)

        self._config = self._create_config_object(self._raw_config)
        logger.debug("Loaded generator configuration from %s: %s", path, self._config)
        return self._config

    def _load_ini(self, path: str) -> dict[str, Any]:
        """Load INI configuration file."""
        config = configparser.ConfigParser()
        try:
            config.read(path, encoding="utf-8")
        except configparser.Error as e:
            raise ConfigParseError(f"Invalid INI file {path}: {e}") from e

        result: dict[str, Any] = {}
        for section_name in config.sections():
            section: dict[str, Any] = {}
            for key, value in config[section_name].items():
                section[key] = self._parse_ini_value(value)
            result[section_name] = section

        return result

    @staticmethod
    def _parse_ini_value(value: str) -> Any:
        # JSON covers numbers and lists; ISO timestamps and bare words fall through
        try:
            return json.loads(value)
        except (json.JSONDecodeError, ValueError):
            pass
        if value.lower() == "none":
            return None
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return value

    def _load_json(self, path: str) -> dict[str, Any]:
        """Load JSON configuration file."""
        with open(path, "r", encoding="utf-8") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigParseError(f"Invalid JSON file {path}: {e}") from e

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """Load YAML configuration file."""
        with open(path, "r", encoding="utf-8") as f:
            try:
                return yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigParseError(f"Invalid YAML file {path}: {e}") from e

    def _create_config_object(self, raw_config: dict[str, Any]) -> GeneratorConfig:
        """Create structured configuration object from raw config."""
        if not isinstance(raw_config, dict):
            raise ConfigParseError("Configuration root must be a mapping")

        section = raw_config.get(REQUIRED_SECTION, {})
        if not isinstance(section, dict):
            raise ConfigParseError(f"Section '{REQUIRED_SECTION}' must be a mapping")

        seeds = self._coerce_seeds(section.get("seeds", DEFAULT_SEEDS))
        log_level = str(section.get("log_level", "WARNING")).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigParseError(f"Unknown log level: {log_level}")

        return GeneratorConfig(seeds=seeds, log_level=log_level)

    @staticmethod
    def _coerce_seeds(value: Any) -> SeedSetting:
        """Convert a raw seed setting, rejecting values no seed input accepts."""
        if isinstance(value, list):
            value = tuple(value)
        if isinstance(value, bool) or not isinstance(value, (tuple, int, datetime, type(None))):
            raise ConfigParseError(f"Invalid seeds setting: {value!r}")
        if isinstance(value, tuple) and (
            len(value) != 2 or not all(isinstance(v, int) and not isinstance(v, bool) for v in value)
        ):
            raise ConfigParseError(f"Seed pair must hold two integers, got {value!r}")

        as_seed_input(value)
        return value

    def get_config(self) -> GeneratorConfig | None:
        """Get the loaded configuration object."""
        return self._config


def load_config(path: str = DEFAULT_CONFIG_PATH) -> GeneratorConfig:
    """Load generator settings from a configuration file.

    :param path: Path to an INI, JSON or YAML file, defaults to the packaged template
    :type path: str
    :return: Validated configuration
    :rtype: GeneratorConfig
    """
    return ConfigManager(path).get_config()  # type: ignore[return-value]


def create_generator(config: GeneratorConfig | None = None) -> SimpleRandom:
    """Build a generator seeded from configuration.

    Applies the configured log level to simrand loggers before seeding.

    :param config: Settings to use, defaults to ``GeneratorConfig()``
    :type config: GeneratorConfig | None
    :return: A seeded generator
    :rtype: SimpleRandom
    """
    config = config or GeneratorConfig()
    set_log_level(config.log_level)
    generator = SimpleRandom()
    generator.set_seeds(config.seeds)
    return generator
