#!/usr/bin/env python3
"""Configuration loader with environment-based config support."""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from appcontrol.core.config_schema import config_to_dict, validate_config
from appcontrol.core.logging_utils import setup_logger

logger = setup_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "base.yaml"


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from YAML files with environment-based overrides.

    Loads the base config and merges the environment-specific config from
    envs/{APPCONTROL_ENV}.yaml next to it (default env: dev).

    Args:
        config_path: Path to base config file (default: config/base.yaml)

    Returns:
        Configuration dictionary with environment overrides applied

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        ValidationError: If the merged config fails schema validation

    Environment Variables:
        APPCONTROL_ENV: Environment name (dev|prod, default: dev)
        STRICT_CONFIG: Set to 0 to skip schema validation
    """
    env = os.getenv("APPCONTROL_ENV", "dev")

    config_file = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_file}")

    with open(config_file, encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    env_config_path = config_file.parent / "envs" / f"{env}.yaml"
    if env_config_path.exists():
        logger.info(f"Loading {env} environment config")
        with open(env_config_path, encoding="utf-8") as f:
            env_config = yaml.safe_load(f)
        if env_config:
            _deep_merge(config, env_config)
    else:
        logger.debug(f"No environment config found for '{env}' (expected: {env_config_path})")

    config = _expand_env_vars(config)

    if os.getenv("STRICT_CONFIG", "1") != "0":
        try:
            config = config_to_dict(validate_config(config))
        except ValidationError as e:
            logger.error(f"Config validation failed: {e}")
            raise
        logger.debug("Config validation passed")

    return config


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand ${VAR} and $VAR environment variables in config.

    Unknown variables are left as written.
    """
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):

        def replace_env(match):
            var_name = match.group(1) or match.group(2)
            return os.getenv(var_name, match.group(0))

        return re.sub(r"\$\{([^}]+)\}|\$([A-Z_][A-Z0-9_]*)", replace_env, obj)
    else:
        return obj


def _deep_merge(base: dict, override: dict):
    """Deep merge override dict into base dict in-place.

    Lists are replaced, not concatenated.
    """
    for key, value in override.items():
        if isinstance(value, dict) and key in base and isinstance(base[key], dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def get_nested(config: dict, path: str, default: Any = None) -> Any:
    """Get nested config value using dot notation.

    Examples:
        >>> config = {'logging': {'level': 'INFO'}}
        >>> get_nested(config, 'logging.level')
        'INFO'
        >>> get_nested(config, 'logging.file', default='app.log')
        'app.log'
    """
    value = config
    for key in path.split("."):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value


def set_nested(config: dict, path: str, value: Any):
    """Set nested config value using dot notation.

    Examples:
        >>> config = {}
        >>> set_nested(config, 'logging.level', 'DEBUG')
        >>> config
        {'logging': {'level': 'DEBUG'}}
    """
    keys = path.split(".")
    current = config
    for key in keys[:-1]:
        current = current.setdefault(key, {})
    current[keys[-1]] = value


def override_from_args(config: dict, args):
    """Apply CLI argument overrides to config.

    Overrides:
        --log-level LEVEL -> logging.level
        --log-file PATH -> logging.file
    """
    if getattr(args, "log_level", None):
        set_nested(config, "logging.level", args.log_level.upper())

    if getattr(args, "log_file", None):
        set_nested(config, "logging.file", args.log_file)
