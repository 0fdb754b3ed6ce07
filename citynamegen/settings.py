#!/usr/bin/env python3
"""
Application Settings
====================
Reads ``configs/app.yaml`` once per process and answers dotted lookups:

    get_setting("generation.count.max", 999)

Relative paths in the config are taken relative to the package directory,
so the bundled fragment file is found wherever the package is installed.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
APP_CONFIG_PATH = PACKAGE_ROOT / "configs" / "app.yaml"
FALLBACK_DATA_FILE = "data/citynamegen_data.yaml"


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    """Parsed app.yaml; an empty file yields an empty dict."""
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"App config not found: {APP_CONFIG_PATH}")
    return yaml.safe_load(APP_CONFIG_PATH.read_text(encoding="utf-8")) or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Look up ``a.b.c`` in the app config, or ``default`` if any key is missing."""
    node: Any = load_app_config()
    for key in path.split('.'):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Expand ``~`` and anchor relative paths at ``base`` (the package by default)."""
    if value is None:
        raise ValueError("path value is required")
    path = Path(os.path.expanduser(str(value)))
    if path.is_absolute():
        return path
    return ((base or PACKAGE_ROOT) / path).resolve()


def default_data_file() -> Path:
    """Fragment document named by ``data.file``."""
    return resolve_path(get_setting("data.file", FALLBACK_DATA_FILE))


__all__ = [
    "load_app_config",
    "get_setting",
    "resolve_path",
    "default_data_file",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
]
