"""Configuration management for tweetclone."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from .models.config import TweetcloneConfig

# Application name for XDG paths
APP_NAME = "tweetclone"

# Default configuration
DEFAULT_CONFIG: dict[str, Any] = {
    "statuses": {
        "max_length": 140,
    },
    "timeline": {
        "per_source_limit": 10,  # statuses fetched per user before merging
        "page_size": 11,
    },
    "shortener": {
        "enabled": True,
        "api_url": "http://tinyurl.com/api-create.php",
        "timeout_seconds": 2.0,
        "cache_size": 1024,  # distinct URLs remembered per process
    },
    "follow": {
        "case_insensitive": True,
    },
    "paths": {
        # If not set, XDG defaults are used
        "data_dir": None,
    },
    "web": {
        "user_header": "X-Tweetclone-User",
    },
}


def get_xdg_config_home() -> Path:
    """Get XDG config home directory."""
    return Path(os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config")))


def get_xdg_data_home() -> Path:
    """Get XDG data home directory."""
    return Path(os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share")))


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_xdg_config_home() / APP_NAME / "config.json"


def load_config() -> dict[str, Any]:
    """Load configuration, merging with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = get_config_path()

    if config_path.exists():
        with open(config_path) as f:
            user_config = json.load(f)
            config = deep_merge(config, user_config)

    return config


def load_settings() -> TweetcloneConfig:
    """Load configuration as a validated model."""
    return TweetcloneConfig.model_validate(load_config())


def save_config(config: dict[str, Any]) -> None:
    """Save configuration to file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        json.dump(config, f, indent=2)


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def get_data_dir() -> Path:
    """
    Get the data directory for tweetclone.

    Priority:
    1. TWEETCLONE_DATA_DIR environment variable
    2. paths.data_dir in config.json
    3. XDG default: ~/.local/share/tweetclone/
    """
    env_dir = os.environ.get("TWEETCLONE_DATA_DIR")
    if env_dir:
        return Path(env_dir)

    config = load_config()
    config_dir = config.get("paths", {}).get("data_dir")
    if config_dir:
        return Path(config_dir)

    return get_xdg_data_home() / APP_NAME


def get_database_path() -> Path:
    """Get the database path."""
    return get_data_dir() / "tweetclone.db"
