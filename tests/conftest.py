"""Shared fixtures for the city name generator tests."""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class ScriptedRandom:
    """Random source that replays fixed draws and fails when they run out."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        if self.calls >= len(self._values):
            raise AssertionError(f"unexpected draw #{self.calls + 1}")
        value = self._values[self.calls]
        self.calls += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self._values) - self.calls


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def document():
    """Small fragment document with every section present."""
    return {
        'settings': {
            'prefixThreshold': 0.15,
            'suffixThreshold': 0.11,
            'doubleThreshold': 0.10,
        },
        'prefixes': ['Alt', 'Neu'],
        'suffixes': ['am Main', 'an der Elbe', 'im Harz', 'bei Berlin', 'ob der Tauber'],
        'parts': [
            ['ber', 'mün', 'ham'],
            ['lin', 'chen', 'burg', 'dorf'],
        ],
    }


@pytest.fixture
def parts_only():
    """Document with only the required parts."""
    return {
        'parts': [
            ['ber', 'mün', 'ham'],
            ['lin', 'chen', 'burg', 'dorf'],
        ],
    }
