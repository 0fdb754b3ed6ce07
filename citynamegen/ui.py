#!/usr/bin/env python3
"""
Statistics Reports
==================
Renders the combinatorics of a fragment set for the terminal.

Two renderers share the same three sections (parts, affixes, combinations):
a fixed-width text report for pipes and quiet terminals, and Rich tables
for interactive use.

Usage:
    from citynamegen.ui import print_statistics

    print_statistics(gen.compute_statistics())
"""

import sys
from typing import List, Tuple

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table

from .generators import Statistics


def _sections(stats: Statistics) -> List[Tuple[str, List[Tuple[str, int]]]]:
    return [
        ("Parts", [
            ("First parts", stats.first_count),
            ("Second parts", stats.second_count),
            ("Base names (P0×P1)", stats.base),
        ]),
        ("Affixes", [
            ("Prefixes", stats.prefix_count),
            ("Suffixes", stats.suffix_count),
        ]),
        ("Combinations (no probabilities applied)", [
            ("Base only", stats.base),
            ("With prefixes", stats.with_prefixes),
            ("With suffixes", stats.with_suffixes),
            ("With both", stats.with_both),
            ("Hyphenated double", stats.double_count),
            ("Approx total incl dbl", stats.approx_total_incl_double),
        ]),
    ]


def format_statistics(stats: Statistics) -> str:
    """Fixed-width text report with thousands separators."""
    lines = []
    for title, rows in _sections(stats):
        if lines:
            lines.append("")
        lines.append(f"{title}:")
        lines.append("-" * (len(title) + 1))
        # counts in the combinations block reach tens of millions
        width = 15 if title.startswith("Combinations") else 8
        for label, value in rows:
            lines.append(f"{label:<22}: {value:>{width},}")
    return "\n".join(lines) + "\n"


def render_statistics(stats: Statistics) -> Panel:
    """Rich panel with one table per section."""
    tables = []
    for title, rows in _sections(stats):
        table = Table(title=f"[bold]{title}[/bold]", title_justify="left",
                      box=box.SIMPLE, show_header=False, padding=(0, 1))
        table.add_column("Label", min_width=22)
        table.add_column("Count", justify="right", style="cyan")
        for label, value in rows:
            table.add_row(label, f"{value:,}")
        tables.append(table)

    return Panel(Group(*tables), title="[bold]Statistics[/bold]",
                 border_style="cyan", box=box.ROUNDED)


def print_statistics(stats: Statistics, plain: bool = False, console: Console = None) -> None:
    """Print statistics, falling back to plain text when not on a terminal."""
    if plain or (console is None and not sys.stdout.isatty()):
        sys.stdout.write(format_statistics(stats))
        return
    console = console or Console()
    console.print(render_statistics(stats))


__all__ = [
    'format_statistics',
    'render_statistics',
    'print_statistics',
]
