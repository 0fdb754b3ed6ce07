#!/usr/bin/env python3
"""
City Name Generator CLI
=======================
Command-line interface for generating city names and showing statistics.

Usage:
    citynamegen generate -n 10
    citynamegen generate -n 20 --prefix 0.3 --double 0.2
    citynamegen stats --json
"""

import argparse
import json
import logging
import math
import sys
from pathlib import Path

from citynamegen import __version__
from citynamegen.generators import CityNameGenerator, clamp01
from citynamegen.settings import default_data_file, get_setting, resolve_path

logger = logging.getLogger(__name__)

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def result(self, *args, **kwargs):
        """Print command results, shown even in quiet mode."""
        print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)


def clamp_count(count: int) -> int:
    """Clamp a requested name count to the configured bounds."""
    low = int(get_setting('generation.count.min', 1))
    high = int(get_setting('generation.count.max', 999))
    return max(low, min(high, count))


def probability(value: str) -> float:
    """argparse type for a threshold; clamps to [0, 1]."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"not a finite number: {value!r}")
    return clamp01(number)


def load_generator(args, out: Output):
    """Build a generator from --data (or the bundled file); None on failure."""
    path = resolve_path(args.data, base=Path.cwd()) if args.data else default_data_file()
    gen = CityNameGenerator()
    if not gen.load(path):
        out.error(f"Could not load fragment data from {path}")
        return None
    logger.debug(f"Loaded fragment data from {path}")
    return gen


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate city names."""
    gen = load_generator(args, out)
    if gen is None:
        return 1

    current = gen.thresholds
    gen.set_thresholds(
        prefix=current.prefix if args.prefix is None else args.prefix,
        suffix=current.suffix if args.suffix is None else args.suffix,
        double=current.double if args.double is None else args.double,
    )
    logger.debug(f"Thresholds: {gen.thresholds}")

    count = clamp_count(args.count)
    for i, name in enumerate(gen.generate_batch(count), 1):
        if count > 1:
            out.result(f"{i:2}. {name}")
        else:
            out.result(name)
    return 0


def cmd_stats(args, out: Output):
    """Show combinatorics of the fragment data."""
    from citynamegen.ui import print_statistics

    gen = load_generator(args, out)
    if gen is None:
        return 1

    stats = gen.compute_statistics()
    if args.json:
        out.result(json.dumps(stats.to_dict(), indent=2))
    else:
        print_statistics(stats, plain=args.plain)
    return 0


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='citynamegen',
        description='City Name Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -n 10
  %(prog)s generate -n 20 --prefix 0.3 --suffix 0.2 --double 0.1
  %(prog)s generate --data my_fragments.json
  %(prog)s stats
  %(prog)s stats --json
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    default_count = int(get_setting('generation.count.default', 10))

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate city names')
    p.add_argument('-n', '--count', type=int, default=default_count,
                   help=f'Number of names (default: {default_count})')
    p.add_argument('--prefix', '-p', type=probability, help='Probability of a prefix (0-1)')
    p.add_argument('--suffix', '-s', type=probability, help='Probability of a suffix (0-1)')
    p.add_argument('--double', '-d', type=probability, help='Probability of a hyphenated double name (0-1)')
    p.add_argument('--data', help='Fragment data file (JSON or YAML)')

    # --- stats ---
    p = subparsers.add_parser('stats', help='Show fragment statistics')
    p.add_argument('--data', help='Fragment data file (JSON or YAML)')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    p.add_argument('--plain', action='store_true', help='Plain text output')

    # Parse
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'stats': cmd_stats,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
