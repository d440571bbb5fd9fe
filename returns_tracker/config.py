"""
Configuration settings for the Returns Tracker
"""

import copy
import json
import logging
import os
from typing import Any, Dict

import dotenv

from returns_tracker.errors import ConfigError

logger = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    "api": {
        "base_url": "http://localhost:8081/api/mobile",
        "timeout": 15,
    },
    "ui": {
        "page_size": 10,
        "debounce_ms": 500,
        "load_more_threshold": 3,
        "date_format": "%b %d, %Y %I:%M %p",
    },
    "logging": {
        "level": "INFO",
        "file": "logs/returns.log",
    },
}

CONFIG_FILE = os.path.expanduser("~/.returns_tracker_config.json")

# env var -> (section, key, converter)
ENV_OVERRIDES = {
    "RETURNS_API_URL": ("api", "base_url", str),
    "RETURNS_API_TIMEOUT": ("api", "timeout", float),
    "RETURNS_PAGE_SIZE": ("ui", "page_size", int),
    "RETURNS_LOG_LEVEL": ("logging", "level", str),
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into ``base`` section by section."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_file: str = CONFIG_FILE) -> Dict[str, Any]:
    """
    Load configuration from file or environment variables

    Precedence: environment (including a local .env) > config file > defaults.
    """
    dotenv.load_dotenv()
    config = copy.deepcopy(DEFAULT_CONFIG)

    # Check for config file
    if os.path.exists(config_file):
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                _merge(config, json.load(f))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Error loading config file {config_file}: {e}")

    # Override with environment variables
    for env_name, (section, key, convert) in ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if not raw:
            continue
        try:
            config[section][key] = convert(raw)
        except ValueError as e:
            raise ConfigError(f"Invalid value for {env_name}: {raw!r}") from e

    if config["ui"]["page_size"] <= 0:
        raise ConfigError("ui.page_size must be a positive integer")

    return config


def save_config(config: Dict[str, Any], config_file: str = CONFIG_FILE) -> bool:
    """
    Save configuration to file
    """
    try:
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        return True
    except OSError as e:
        logger.error(f"Error saving config file: {e}")
        return False
