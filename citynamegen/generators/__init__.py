#!/usr/bin/env python3
"""
City Name Generators
====================
Fragment-based place name composition:
- fragments: document loading, pools and thresholds
- entropy: injectable uniform random sources
- city_generator: the name composer and its combinatorics
"""

from .entropy import (
    RandomSource,
    TrueRandom,
    get_rng,
    pick,
)
from .fragments import (
    DEFAULT_PREFIX,
    DEFAULT_SUFFIX,
    DEFAULT_DOUBLE,
    Thresholds,
    GeneratorConfig,
    clamp01,
    read_document,
    parse_document,
    load_fragments,
)
from .city_generator import (
    CityNameGenerator,
    GeneratorNotLoadedError,
    Statistics,
    generate_cities,
    titlecase,
)

__all__ = [
    # Random sources
    'RandomSource',
    'TrueRandom',
    'get_rng',
    'pick',
    # Fragment data
    'DEFAULT_PREFIX',
    'DEFAULT_SUFFIX',
    'DEFAULT_DOUBLE',
    'Thresholds',
    'GeneratorConfig',
    'clamp01',
    'read_document',
    'parse_document',
    'load_fragments',
    # Generator
    'CityNameGenerator',
    'GeneratorNotLoadedError',
    'Statistics',
    'generate_cities',
    'titlecase',
]
