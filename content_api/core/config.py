# content_api/core/config.py - Configuration management
import copy
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()

CONFIG_ENV_VAR = "CONTENT_API_CONFIG"
DATA_FILE_ENV_VAR = "CONTENT_API_DATA_FILE"
CONFIG_FILE = "config.yml"

_PACKAGE_DIR = Path(__file__).resolve().parents[1]
DEFAULT_DATA_FILE = _PACKAGE_DIR / "data" / "resources.json"


def get_default_config() -> dict[str, Any]:
    """Return default configuration"""
    return {
        "data": {"source": str(DEFAULT_DATA_FILE)},
        "cache": {"scope": "process", "resource_ttl": 300, "list_ttl": 60},
        "pagination": {
            "default_page": 1,
            "max_page": 100,
            "default_limit": 10,
            "max_limit": 50,
        },
        "http": {"list_max_age": 60, "detail_max_age": 300},
    }


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def get_config_path() -> Path:
    """Config file location, overridable via CONTENT_API_CONFIG"""
    return Path(os.getenv(CONFIG_ENV_VAR, CONFIG_FILE))


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """
    Load configuration from config.yml merged over the defaults

    Args:
        path: Explicit config file path. Defaults to get_config_path()

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If the file exists but is not a YAML mapping
    """
    config = copy.deepcopy(get_default_config())
    config_path = Path(path) if path is not None else get_config_path()

    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Invalid YAML in {config_path}", details={"reason": str(e)}
                ) from e
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")
        _merge(config, loaded)

    data_file = os.getenv(DATA_FILE_ENV_VAR)
    if data_file:
        config["data"]["source"] = data_file

    return config
