#!/usr/bin/env python3
"""
Fragment Data Loader
====================
Parses a fragment document into the pools and thresholds the city name
generator works from.

Document layout (JSON or YAML):

    settings:            # optional numeric overrides
      prefixThreshold: 0.15
      suffixThreshold: 0.11
      doubleThreshold: 0.10
    prefixes: [...]      # optional
    suffixes: [...]      # optional
    parts:               # required, two non-empty lists
      - [...]            # first parts
      - [...]            # second parts

Loading never raises. A document that cannot be used yields ``None`` and
the reason is logged at DEBUG level.
"""

import json
import logging
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = 0.15
DEFAULT_SUFFIX = 0.11
DEFAULT_DOUBLE = 0.10

SETTINGS_KEYS = {
    'prefix': 'prefixThreshold',
    'suffix': 'suffixThreshold',
    'double': 'doubleThreshold',
}

Source = Union[str, os.PathLike, Mapping[str, Any]]


def clamp01(value: float) -> float:
    """Clamp a probability to [0, 1]. NaN becomes 0."""
    value = float(value)
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class Thresholds:
    """Probabilities of adding a prefix, a suffix and a hyphenated double."""
    prefix: float = DEFAULT_PREFIX
    suffix: float = DEFAULT_SUFFIX
    double: float = DEFAULT_DOUBLE

    def __post_init__(self):
        for name in ('prefix', 'suffix', 'double'):
            object.__setattr__(self, name, clamp01(getattr(self, name)))


@dataclass
class GeneratorConfig:
    """Loaded fragment pools plus the thresholds applied to them."""
    first_parts: Tuple[str, ...] = ()
    second_parts: Tuple[str, ...] = ()
    prefixes: Tuple[str, ...] = ()
    suffixes: Tuple[str, ...] = ()
    thresholds: Thresholds = field(default_factory=Thresholds)

    @property
    def is_loaded(self) -> bool:
        return bool(self.first_parts) and bool(self.second_parts)


# =============================================================================
# Loading
# =============================================================================

def read_document(source: Source) -> Optional[Dict[str, Any]]:
    """
    Read a fragment document from a path or take an already parsed mapping.

    Files ending in ``.json`` are parsed as JSON, everything else as YAML.

    Returns
    -------
    dict or None
        The document, or None if it is unreadable or not a mapping.
    """
    if isinstance(source, Mapping):
        return dict(source)

    if not isinstance(source, (str, os.PathLike)):
        logger.debug(f"Unsupported fragment source type: {type(source).__name__}")
        return None

    path = Path(source)
    if not path.is_file():
        logger.debug(f"Fragment file not found: {path}")
        return None

    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read fragment file {path}: {e}")
        return None

    try:
        if path.suffix.lower() == '.json':
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError, RecursionError) as e:
        logger.debug(f"Could not parse fragment file {path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.debug(f"Fragment file {path} is not a mapping")
        return None
    return data


def _as_pool(value: Any) -> Tuple[str, ...]:
    """Coerce a list of fragments to a tuple of non-empty strings."""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return ()

    pool = []
    for item in value:
        if isinstance(item, bool):
            continue
        if isinstance(item, (int, float)):
            try:
                item = str(item)
            except ValueError:
                # ints past the interpreter's digit limit
                continue
        if isinstance(item, str) and item:
            pool.append(item)
    return tuple(pool)


def _threshold_value(settings: Dict[str, Any], key: str, current: float) -> float:
    value = settings.get(key)
    if value is None or isinstance(value, bool):
        return current
    if not isinstance(value, (int, float, str)):
        return current
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return current
    if not math.isfinite(number):
        return current
    return number


def parse_document(data: Dict[str, Any],
                   defaults: Thresholds = None) -> Optional[GeneratorConfig]:
    """
    Build a GeneratorConfig from a parsed document.

    Thresholds found under ``settings`` override ``defaults``; missing or
    malformed values keep the default.
    """
    defaults = defaults or Thresholds()

    parts = data.get('parts')
    if not isinstance(parts, (list, tuple)) or len(parts) < 2:
        logger.debug("Fragment document needs 'parts' with two lists")
        return None
    if not isinstance(parts[0], (list, tuple)) or not isinstance(parts[1], (list, tuple)):
        logger.debug("Both entries of 'parts' must be lists")
        return None

    first_parts = _as_pool(parts[0])
    second_parts = _as_pool(parts[1])
    if not first_parts or not second_parts:
        logger.debug(
            f"Empty part pool (first={len(first_parts)}, second={len(second_parts)})"
        )
        return None

    settings = data.get('settings')
    if not isinstance(settings, dict):
        settings = {}

    thresholds = Thresholds(**{
        name: _threshold_value(settings, key, getattr(defaults, name))
        for name, key in SETTINGS_KEYS.items()
    })

    return GeneratorConfig(
        first_parts=first_parts,
        second_parts=second_parts,
        prefixes=_as_pool(data.get('prefixes')),
        suffixes=_as_pool(data.get('suffixes')),
        thresholds=thresholds,
    )


def load_fragments(source: Source, defaults: Thresholds = None) -> Optional[GeneratorConfig]:
    """Read and parse a fragment document in one step."""
    data = read_document(source)
    if data is None:
        return None
    return parse_document(data, defaults)


__all__ = [
    "DEFAULT_PREFIX",
    "DEFAULT_SUFFIX",
    "DEFAULT_DOUBLE",
    "Thresholds",
    "GeneratorConfig",
    "clamp01",
    "read_document",
    "parse_document",
    "load_fragments",
]
