"""Global configuration: user defaults stored as JSON under ``~/.config/akit``."""

from __future__ import annotations

import json
from pathlib import Path

from akit.core.schema import Domain
from akit.publish import list_publishers

CONFIG_KEYS = ("default_domain", "default_marketplace")


def global_config_dir() -> Path:
    config = Path.home() / ".config" / "akit"
    config.mkdir(parents=True, exist_ok=True)
    return config


def load_global_config() -> dict:
    path = global_config_dir() / "config.json"
    if path.exists():
        return json.loads(path.read_text())
    return {}


def save_global_config(config: dict) -> None:
    path = global_config_dir() / "config.json"
    path.write_text(json.dumps(config, indent=2))


def check_value(key: str, value: str) -> str:
    """Validate a config value, raising ValueError on bad keys or values."""
    if key not in CONFIG_KEYS:
        raise ValueError(f"Unknown config key: {key}. Valid keys: {', '.join(CONFIG_KEYS)}")
    if key == "default_domain":
        return Domain(value).value
    if key == "default_marketplace":
        if value not in list_publishers():
            raise ValueError(
                f"Unknown marketplace: {value}. Available: {', '.join(list_publishers())}"
            )
    return value


def default_domain() -> Domain:
    return Domain(load_global_config().get("default_domain", Domain.agents.value))


def default_marketplace() -> str:
    return load_global_config().get("default_marketplace", "claude")
