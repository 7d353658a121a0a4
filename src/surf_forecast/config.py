"""
Runtime settings for the surf forecast CLI.

Built-in defaults can be overridden by a YAML file passed on the command line.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

GEOCODER_URL = "https://nominatim.openstreetmap.org/search"
MARINE_URL = "https://marine-api.open-meteo.com/v1/marine"
USER_AGENT = "surf-forecast"
REQUEST_TIMEOUT = 30  # seconds
WEEK_DAYS = 7

DEFAULT_SETTINGS: Dict[str, Any] = {
    'api': {
        'geocoder_url': GEOCODER_URL,
        'marine_url': MARINE_URL,
        'user_agent': USER_AGENT,
        'timeout': REQUEST_TIMEOUT,
    },
    'forecast': {
        'week_days': WEEK_DAYS,
    },
}


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge overrides into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load settings, layering an optional YAML file over the defaults.

    Args:
        config_path: Path to a YAML settings file. If None, defaults are returned.

    Returns:
        Settings dictionary with 'api' and 'forecast' sections.

    Raises:
        ConfigError: If the file cannot be read or does not hold a mapping.
    """
    if config_path is None:
        return copy.deepcopy(DEFAULT_SETTINGS)

    try:
        with open(config_path, 'r') as f:
            overrides = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read settings file {config_path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in settings file {config_path}: {e}")

    if overrides is None:
        overrides = {}
    if not isinstance(overrides, dict):
        raise ConfigError(f"Settings file {config_path} must contain a mapping")

    settings = _merge(DEFAULT_SETTINGS, overrides)
    _validate(settings, config_path)
    logger.debug(f"Loaded settings overrides from {config_path}")
    return settings


def _validate(settings: Dict[str, Any], config_path: Union[str, Path]) -> None:
    """Check section shapes and value types of merged settings.

    Raises:
        ConfigError: If a section is not a mapping or a value has the wrong type.
    """
    for section in DEFAULT_SETTINGS:
        if not isinstance(settings[section], dict):
            raise ConfigError(f"Section '{section}' in {config_path} must be a mapping")

    api = settings['api']
    for key in ('geocoder_url', 'marine_url', 'user_agent'):
        if not isinstance(api[key], str) or not api[key]:
            raise ConfigError(f"'api.{key}' in {config_path} must be a non-empty string")

    timeout = api['timeout']
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(f"'api.timeout' in {config_path} must be a positive number")

    week_days = settings['forecast']['week_days']
    if isinstance(week_days, bool) or not isinstance(week_days, int) or week_days < 1:
        raise ConfigError(f"'forecast.week_days' in {config_path} must be a positive integer")
