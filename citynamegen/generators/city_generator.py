#!/usr/bin/env python3
"""
City Name Generator
===================
Composes place names from two syllable pools, optionally hyphenating two
base names and attaching a prefix word or a suffix phrase.

Each optional step fires when a fresh uniform draw falls below its
threshold, so a threshold of 0 never applies the step and 1 always does.

Usage:
    gen = CityNameGenerator()
    if gen.load("citynamegen_data.yaml"):
        for _ in range(10):
            print(gen.generate())
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List

from .entropy import RandomSource, get_rng, pick
from .fragments import GeneratorConfig, Source, Thresholds, load_fragments

_WORD = re.compile(r'\S+')


def titlecase(text: str) -> str:
    """Upper-case the first letter of each word and lower-case the rest."""
    return _WORD.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), text)


class GeneratorNotLoadedError(RuntimeError):
    """Raised when names are requested before fragment data was loaded."""


@dataclass(frozen=True)
class Statistics:
    """
    Size of the name space spanned by the current pools.

    No probabilities are applied. ``double_count`` counts ordered pairs of
    base names, self-pairs included, and ``approx_total_incl_double`` is an
    upper bound: identical strings reached through different fragment
    choices are not subtracted.
    """
    first_count: int
    second_count: int
    base: int
    prefix_count: int
    suffix_count: int
    double_count: int
    with_prefixes: int
    with_suffixes: int
    with_both: int
    approx_total_incl_double: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'parts': {
                'first': self.first_count,
                'second': self.second_count,
                'base': self.base,
            },
            'prefixes': self.prefix_count,
            'suffixes': self.suffix_count,
            'variants': {
                'base': self.base,
                'with_prefixes': self.with_prefixes,
                'with_suffixes': self.with_suffixes,
                'with_prefixes_and_suffixes': self.with_both,
                'double_base': self.double_count,
                'approx_total_incl_double': self.approx_total_incl_double,
            },
        }


class CityNameGenerator:
    """
    Generates city names from loaded fragment pools.

    A generator holds no memory of earlier names; every ``generate()`` call
    is independent. It is not synchronized: share one instance between
    threads only after loading and without calling ``set_thresholds``.

    Parameters
    ----------
    thresholds : Thresholds, optional
        Defaults used until a loaded document or ``set_thresholds``
        overrides them.
    rng : RandomSource, optional
        Source of uniform floats in [0, 1). Defaults to the shared
        system-entropy source.
    """

    def __init__(self, thresholds: Thresholds = None, rng: RandomSource = None):
        self._rng = rng if rng is not None else get_rng()
        self._config = GeneratorConfig(thresholds=thresholds or Thresholds())

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def rng(self) -> RandomSource:
        return self._rng

    @property
    def thresholds(self) -> Thresholds:
        return self._config.thresholds

    @property
    def is_loaded(self) -> bool:
        return self._config.is_loaded

    def load(self, source: Source) -> bool:
        """
        Load fragment pools from a file path or a parsed mapping.

        Returns False when the document is unusable. The generator is then
        left empty and ``generate()`` will raise until a later load succeeds.
        """
        config = load_fragments(source, defaults=self._config.thresholds)
        if config is None:
            self._config = GeneratorConfig(thresholds=self._config.thresholds)
            return False
        self._config = config
        return True

    def set_thresholds(self, prefix: float, suffix: float, double: float) -> None:
        """Replace all three thresholds; values are clamped to [0, 1]."""
        self._config.thresholds = Thresholds(prefix=prefix, suffix=suffix, double=double)

    def _generate_base_name(self) -> str:
        first = pick(self._config.first_parts, self._rng)
        second = pick(self._config.second_parts, self._rng)
        return titlecase(first + second)

    def generate(self) -> str:
        """Generate one name, possibly a hyphenated double with affixes."""
        if not self._config.is_loaded:
            raise GeneratorNotLoadedError("No fragment data loaded; call load() first")

        cfg = self._config
        name = self._generate_base_name()

        # Optional double: CityA-CityB
        if self._rng.random() < cfg.thresholds.double:
            name = name + '-' + self._generate_base_name()

        if cfg.prefixes and self._rng.random() < cfg.thresholds.prefix:
            name = pick(cfg.prefixes, self._rng) + ' ' + name

        if cfg.suffixes and self._rng.random() < cfg.thresholds.suffix:
            name = name + ' ' + pick(cfg.suffixes, self._rng)

        return name

    def generate_batch(self, count: int = 10) -> List[str]:
        return [self.generate() for _ in range(max(count, 0))]

    def compute_statistics(self) -> Statistics:
        """Count the combinations reachable from the current pools."""
        cfg = self._config
        first = len(cfg.first_parts)
        second = len(cfg.second_parts)
        prefixes = len(cfg.prefixes)
        suffixes = len(cfg.suffixes)

        base = first * second
        double = base * base

        return Statistics(
            first_count=first,
            second_count=second,
            base=base,
            prefix_count=prefixes,
            suffix_count=suffixes,
            double_count=double,
            with_prefixes=base * (prefixes + 1),
            with_suffixes=base * (suffixes + 1),
            with_both=base * (prefixes + 1) * (suffixes + 1),
            approx_total_incl_double=(base + double) * (prefixes + 1) * (suffixes + 1),
        )


def generate_cities(count: int = 10, source: Source = None) -> List[str]:
    """Quick generation function using the bundled fragment data."""
    if source is None:
        from ..settings import default_data_file
        source = default_data_file()

    gen = CityNameGenerator()
    if not gen.load(source):
        raise GeneratorNotLoadedError(f"Could not load fragment data from {source}")
    return gen.generate_batch(count)
