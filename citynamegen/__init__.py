#!/usr/bin/env python3
"""
City Name Generator
===================

Generates plausible place names from syllable fragments, with optional
prefixes, suffixes and hyphenated double names.

Quick Start
-----------
    from citynamegen import CityNameGenerator

    gen = CityNameGenerator()
    gen.load("citynamegen_data.yaml")
    gen.set_thresholds(prefix=0.2, suffix=0.1, double=0.05)

    names = gen.generate_batch(10)
    stats = gen.compute_statistics()

Modules
-------
    citynamegen.generators - Fragment loading, random sources, name composer
    citynamegen.settings   - Application settings (configs/app.yaml)
    citynamegen.ui         - Statistics reports (plain text and rich)

CLI Usage
---------
    python -m citynamegen generate -n 10
    python -m citynamegen generate -n 5 --prefix 1 --double 0
    python -m citynamegen stats --json
"""

__version__ = "1.1.0"
__author__ = "CityNameGen"

from . import generators
from . import settings

from .generators import (
    CityNameGenerator,
    GeneratorConfig,
    GeneratorNotLoadedError,
    RandomSource,
    Statistics,
    Thresholds,
    TrueRandom,
    DEFAULT_PREFIX,
    DEFAULT_SUFFIX,
    DEFAULT_DOUBLE,
    generate_cities,
    load_fragments,
)

__all__ = [
    '__version__',
    'generators',
    'settings',
    'CityNameGenerator',
    'GeneratorConfig',
    'GeneratorNotLoadedError',
    'RandomSource',
    'Statistics',
    'Thresholds',
    'TrueRandom',
    'DEFAULT_PREFIX',
    'DEFAULT_SUFFIX',
    'DEFAULT_DOUBLE',
    'generate_cities',
    'load_fragments',
]
