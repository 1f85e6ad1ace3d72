#!/usr/bin/env python3
"""
Settings
========
Reads markovtext defaults from configs/app.yaml.

Settings are addressed by dotted path, e.g. ``markov.context_length``.
The file is parsed once per path and cached.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional
import os

import yaml

from .errors import InvalidConfiguration

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"


@lru_cache(maxsize=4)
def load_app_config(config_path: Optional[Path] = None) -> dict:
    """Parse a YAML settings file (default: the packaged app.yaml)."""
    config_path = Path(config_path or APP_CONFIG_PATH)
    if not config_path.is_file():
        raise FileNotFoundError(f"Missing app config: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"{config_path.name} must contain a mapping at the top level")
    return data


def lookup(data: dict, path: str, default: Any = None) -> Any:
    """Walk nested mappings along a dotted path."""
    node: Any = data
    for key in path.split('.'):
        try:
            node = node[key]
        except (KeyError, TypeError):
            return default
    return node


def get_setting(path: str, default: Any = None) -> Any:
    """Get a setting from app.yaml by dotted path."""
    return lookup(load_app_config(), path, default)


def require_setting(path: str) -> Any:
    """Like get_setting, but a missing value is a configuration error."""
    value = get_setting(path)
    if value is None:
        raise InvalidConfiguration(f"{path} must be set in app.yaml")
    return value


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Resolve a path string relative to base (the working directory by default)."""
    if value is None:
        raise ValueError("path value is required")
    path = Path(os.path.expanduser(str(value)))
    if not path.is_absolute():
        path = ((base or Path.cwd()) / path).resolve()
    return path


__all__ = [
    "load_app_config",
    "lookup",
    "get_setting",
    "require_setting",
    "resolve_path",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
]
