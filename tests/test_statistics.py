"""
Tests for Combinatorics
=======================
Statistics over pool sizes and their reports.
"""

import copy
from io import StringIO

import pytest
from rich.console import Console

from citynamegen.generators import CityNameGenerator, Statistics
from citynamegen.ui import format_statistics, print_statistics, render_statistics


def make_document(first, second, prefixes, suffixes):
    return {
        'parts': [
            [f'f{i}' for i in range(first)],
            [f's{i}' for i in range(second)],
        ],
        'prefixes': [f'P{i}' for i in range(prefixes)],
        'suffixes': [f'S{i}' for i in range(suffixes)],
    }


@pytest.fixture
def gen():
    g = CityNameGenerator()
    assert g.load(make_document(3, 4, 2, 5))
    return g


class TestComputeStatistics:
    """Tests for CityNameGenerator.compute_statistics()."""

    def test_counts(self, gen):
        stats = gen.compute_statistics()
        assert stats.first_count == 3
        assert stats.second_count == 4
        assert stats.base == 12
        assert stats.prefix_count == 2
        assert stats.suffix_count == 5

    def test_combinations(self, gen):
        stats = gen.compute_statistics()
        assert stats.double_count == 144
        assert stats.with_prefixes == 36
        assert stats.with_suffixes == 72
        assert stats.with_both == 216
        assert stats.approx_total_incl_double == (12 + 144) * 3 * 6 == 2808

    def test_no_affixes(self):
        g = CityNameGenerator()
        g.load(make_document(2, 3, 0, 0))
        stats = g.compute_statistics()
        assert stats.base == 6
        assert stats.with_prefixes == stats.with_suffixes == stats.with_both == 6
        assert stats.approx_total_incl_double == 6 + 36

    def test_thresholds_do_not_matter(self, gen):
        before = gen.compute_statistics()
        gen.set_thresholds(0.0, 0.0, 0.0)
        assert gen.compute_statistics() == before

    def test_deterministic(self, gen):
        assert gen.compute_statistics() == gen.compute_statistics()

    def test_no_side_effects(self, gen):
        before = copy.deepcopy(gen.config)
        gen.compute_statistics()
        assert gen.config == before

    def test_recomputed_after_reload(self, gen):
        gen.load(make_document(1, 1, 0, 0))
        assert gen.compute_statistics().base == 1

    def test_large_pools(self):
        g = CityNameGenerator()
        g.load(make_document(500, 500, 100, 100))
        stats = g.compute_statistics()
        assert stats.base == 250_000
        assert stats.double_count == 62_500_000_000
        assert stats.approx_total_incl_double == (250_000 + 62_500_000_000) * 101 * 101

    def test_unloaded_is_all_zero(self):
        stats = CityNameGenerator().compute_statistics()
        assert stats == Statistics(0, 0, 0, 0, 0, 0, 0, 0, 0, 0)

    def test_to_dict_layout(self, gen):
        data = gen.compute_statistics().to_dict()
        assert data['parts'] == {'first': 3, 'second': 4, 'base': 12}
        assert data['prefixes'] == 2
        assert data['suffixes'] == 5
        assert data['variants'] == {
            'base': 12,
            'with_prefixes': 36,
            'with_suffixes': 72,
            'with_prefixes_and_suffixes': 216,
            'double_base': 144,
            'approx_total_incl_double': 2808,
        }


class TestReports:
    """Tests for the statistics renderers."""

    def test_plain_text(self, gen):
        text = format_statistics(gen.compute_statistics())
        assert text.startswith('Parts:\n------\n')
        assert 'Affixes:' in text
        assert 'Combinations (no probabilities applied):' in text
        assert 'Approx total incl dbl :           2,808' in text

    def test_plain_text_alignment(self, gen):
        lines = format_statistics(gen.compute_statistics()).splitlines()
        assert 'First parts           :        3' in lines

    def test_thousands_separator(self):
        g = CityNameGenerator()
        g.load(make_document(100, 100, 0, 0))
        assert '100,000,000' in format_statistics(g.compute_statistics())

    def test_rich_panel(self, gen):
        buf = StringIO()
        console = Console(file=buf, width=100, color_system=None)
        console.print(render_statistics(gen.compute_statistics()))
        output = buf.getvalue()
        assert 'Statistics' in output
        assert '2,808' in output
        assert 'Hyphenated double' in output

    def test_print_plain(self, gen, capsys):
        print_statistics(gen.compute_statistics(), plain=True)
        assert 'Parts:' in capsys.readouterr().out

    def test_print_to_console(self, gen):
        buf = StringIO()
        print_statistics(gen.compute_statistics(), console=Console(file=buf, width=100))
        assert '216' in buf.getvalue()
