"""
Configuration management and loading.

Handles start-up preferences for the converter screen and logging.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from currency_converter.core.currencies import CURRENCY_TABLE
from currency_converter.core.formatting import DECIMAL_PLACE_OPTIONS
from currency_converter.core.session import (
    DEFAULT_BASE_CODE,
    DEFAULT_DECIMAL_PLACES,
    DEFAULT_TARGET_CODE,
)

CONFIG_ENV_VAR = "CURRENCY_CONVERTER_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class DefaultsConfig:
    """Initial selections of the converter screen."""
    base_currency: str = DEFAULT_BASE_CODE
    target_currency: str = DEFAULT_TARGET_CODE
    decimal_places: int = DEFAULT_DECIMAL_PLACES

    def __post_init__(self):
        """Validate currency codes and precision."""
        for key in ("base_currency", "target_currency"):
            code = getattr(self, key)
            if CURRENCY_TABLE.lookup(code) is None:
                raise ValueError(f"'{key}' must be one of {list(CURRENCY_TABLE.codes())}, got {code!r}")
        if self.decimal_places not in DECIMAL_PLACE_OPTIONS:
            raise ValueError(f"'decimal_places' must be one of {list(DECIMAL_PLACE_OPTIONS)}")


@dataclass(frozen=True)
class DisplayConfig:
    """Appearance and clock refresh settings."""
    dark_theme: bool = False
    clock_interval: float = 1.0  # Seconds between clock refreshes

    def __post_init__(self):
        if self.clock_interval <= 0:
            raise ValueError("clock_interval must be > 0")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging settings."""
    level: str = "WARNING"

    def __post_init__(self):
        if self.level not in LOG_LEVELS:
            raise ValueError(f"logging level must be one of {list(LOG_LEVELS)}")

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level)


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration."""
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_app_config(path: str) -> AppConfig:
    """Load and validate application configuration from a YAML file.

    Every section and key is optional, but unknown keys are rejected so
    that typos never pass silently.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated AppConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If configuration is invalid
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in config file {path}: {e}")

    if raw_config is None:
        return AppConfig()
    if not isinstance(raw_config, dict):
        raise ValueError("Configuration must be a dictionary")

    allowed_top_keys = {'defaults', 'display', 'logging'}
    unknown_keys = set(raw_config.keys()) - allowed_top_keys
    if unknown_keys:
        raise ValueError(f"Unknown configuration keys: {unknown_keys}")

    defaults_data = _section(raw_config, 'defaults', {'base_currency', 'target_currency', 'decimal_places'})
    display_data = _section(raw_config, 'display', {'dark_theme', 'clock_interval'})
    logging_data = _section(raw_config, 'logging', {'level'})

    defaults = DefaultsConfig(
        base_currency=_string(defaults_data, 'base_currency', DEFAULT_BASE_CODE).upper(),
        target_currency=_string(defaults_data, 'target_currency', DEFAULT_TARGET_CODE).upper(),
        decimal_places=_integer(defaults_data, 'decimal_places', DEFAULT_DECIMAL_PLACES),
    )

    dark_theme = display_data.get('dark_theme', False)
    if not isinstance(dark_theme, bool):
        raise ValueError("'dark_theme' in display must be true or false")

    clock_interval = display_data.get('clock_interval', 1.0)
    if isinstance(clock_interval, bool) or not isinstance(clock_interval, (int, float)):
        raise ValueError("'clock_interval' in display must be a number")

    display = DisplayConfig(dark_theme=dark_theme, clock_interval=float(clock_interval))
    log_config = LoggingConfig(level=_string(logging_data, 'level', "WARNING").upper())

    return AppConfig(defaults=defaults, display=display, logging=log_config)


def _section(raw_config: Dict[str, Any], name: str, allowed_keys: set) -> Dict[str, Any]:
    """Extract an optional section and reject unknown keys in it.

    Raises:
        ValueError: If the section is not a dictionary or has unknown keys
    """
    data = raw_config.get(name) or {}
    if not isinstance(data, dict):
        raise ValueError(f"'{name}' must be a dictionary")

    unknown_keys = set(data.keys()) - allowed_keys
    if unknown_keys:
        raise ValueError(f"Unknown keys in {name}: {unknown_keys}")
    return data


def _string(data: Dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    return value


def _integer(data: Dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer")
    return value
