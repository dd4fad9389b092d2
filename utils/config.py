import copy
import os
import yaml
from typing import Dict, Any

from utils.logger import get_logger

DEFAULT_CONFIG = {
    "ajax": {
        "request_type": "ajax",
        "layout": "ajax",
        "form_field": "form",  # request.form key holding the serialized form
        "token_field": "_Token",
    },
    "logging": {
        "level": "INFO",
        "file": None,
        "colors": True,
    },
    "cors": {
        "enabled": True,
    },
}


def default_config() -> Dict[str, Any]:
    """Return a fresh copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(config_path: str = "config/config.yaml") -> Dict[str, Any]:
    """Load configuration from file or use defaults."""
    logger = get_logger()

    if not os.path.exists(config_path):
        logger.info(
            f"Configuration file {config_path} not found, using default configuration"
        )
        return default_config()

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading configuration: {str(e)}")
        logger.info("Using default configuration")
        return default_config()

    if not isinstance(config, dict):
        logger.error(f"Configuration in {config_path} is not a mapping, ignoring it")
        return default_config()

    logger.info(f"Loaded configuration from {config_path}")
    return merge_config(config)


def merge_config(overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge a partial configuration over the defaults."""
    merged_config = default_config()
    _deep_merge(merged_config, overrides or {})
    return merged_config


def _deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries, updating target with values from source."""
    for key, value in source.items():
        if key in target and isinstance(target[key], dict) and isinstance(value, dict):
            _deep_merge(target[key], value)
        else:
            target[key] = value
    return target
