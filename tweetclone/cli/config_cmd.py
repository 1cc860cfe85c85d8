"""Config commands."""

import json
from typing import Any

import pydantic
import rich_click as click
from rich.syntax import Syntax

from ..config import DEFAULT_CONFIG, get_config_path, load_config, save_config
from ..models import TweetcloneConfig
from ._console import console
from ._helpers import fail


def _is_known_key(key: str) -> bool:
    node: Any = DEFAULT_CONFIG
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return False
        node = node[part]
    return not isinstance(node, dict)


def _parse_value(raw: str) -> Any:
    """Decode JSON literals (numbers, booleans, null); anything else stays a string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@click.group()
def config():
    """Manage configuration."""


@config.command("show")
def config_show():
    """Show the effective configuration (defaults merged with config.json)."""
    try:
        settings = TweetcloneConfig.model_validate(load_config())
    except pydantic.ValidationError as e:
        fail(f"{get_config_path()} is invalid: {e}")
    console.print(Syntax(settings.model_dump_json(indent=2), "json", theme="monokai"))


@config.command("path")
def config_path():
    """Show configuration file path."""
    console.print(str(get_config_path()))


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Set a configuration value (e.g., timeline.page_size 20).

    The value is checked against the settings schema before it is saved.
    """
    if not _is_known_key(key):
        fail(f"Unknown setting: {key}")

    cfg = load_config()
    *sections, leaf = key.split(".")
    target = cfg
    for section in sections:
        target = target[section]
    target[leaf] = _parse_value(value)

    try:
        TweetcloneConfig.model_validate(cfg)
    except pydantic.ValidationError as e:
        fail(f"Invalid value for {key}: {e.errors()[0]['msg']}")

    save_config(cfg)
    console.print(f"Set {key} = {target[leaf]!r}", markup=False)
