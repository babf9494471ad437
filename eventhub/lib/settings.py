"""Registry settings loaded from an INI config file."""

from __future__ import annotations

import configparser
import logging
import os
from typing import Any

from eventhub.config import Config, RegistryConfig
from eventhub.constants import CONFIG_SECTION, get_data_directory
from eventhub.lib.exceptions import ConfigurationError


def resolve_config_path(config_file_path: str) -> str:
    """Relative paths are placed in the data directory."""
    if os.path.isabs(config_file_path):
        return config_file_path
    return os.path.join(get_data_directory(), config_file_path)


def convert_value(val: Any) -> Any:
    """Convert a string to bool/int/float if applicable, otherwise return as-is."""
    if not isinstance(val, str):
        return val

    val_lower = val.lower()
    if val_lower in ("true", "yes", "on"):
        return True
    if val_lower in ("false", "no", "off"):
        return False

    stripped = val.lstrip("-")
    if stripped.isdigit():
        return int(val)
    if stripped.replace(".", "", 1).isdigit():
        return float(val)

    return val


def parse_log_level(value: Any) -> int:
    """Accept a numeric level or a level name such as ``debug``."""
    value = convert_value(value)
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid log level: {value}")
    if isinstance(value, int):
        return value

    level = logging.getLevelName(str(value).upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Invalid log level: {value}")
    return level


def load_registry_config(
    config_file_path: str | None = None, defaults: type[Config] = Config
) -> RegistryConfig:
    """Build a RegistryConfig from the [EVENTHUB] section of an INI file.

    Missing files, sections and options fall back to ``defaults``.

    Raises:
        ConfigurationError: If an option holds a value of the wrong type.
    """
    registry_config = defaults.registry_config()
    if config_file_path is None:
        return registry_config

    path = resolve_config_path(config_file_path)
    parser = configparser.ConfigParser()
    # Silently ignores missing files
    parser.read(path, encoding="utf-8")
    logging.debug(f"Using config file: {path}")

    if not parser.has_section(CONFIG_SECTION):
        return registry_config

    section = parser[CONFIG_SECTION]
    if "isolate_failures" in section:
        isolate_failures = convert_value(section["isolate_failures"])
        if not isinstance(isolate_failures, bool):
            raise ConfigurationError(
                f"isolate_failures must be a boolean, got {section['isolate_failures']!r}"
            )
        registry_config.isolate_failures = isolate_failures

    if "log_level" in section:
        registry_config.log_level = parse_log_level(section["log_level"])

    return registry_config
