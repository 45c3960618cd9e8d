"""
Command-line argument parser configuration with subcommands
"""

import argparse

from ..exporters import SUPPORTED_FORMATS
from ..pathfinding import list_heuristics
from ..scenarios import list_scenarios


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Configure and return the argument parser with subcommands (init, run, list)

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='netpath',
        description='Graph storage and A* shortest-path search',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create a scenario file
  netpath init                              # Write ./netpath.yaml
  netpath init --path ./shortcut.yaml       # Write to a custom location

  # Search
  netpath run                               # Auto-discover scenario file and run it
  netpath run shortcut.yaml                 # Use a specific scenario file
  netpath run --scenario grid               # Run a built-in scenario
  netpath run --scenario basic --heuristic zero --no-export
  netpath run --log-level DEBUG             # Show search details

  # Inspect
  netpath list                              # Built-in scenarios and heuristics
        """
    )

    subparsers = parser.add_subparsers(
        dest='command',
        required=True,
        help='Command to execute'
    )

    # ========================================================================
    # INIT SUBCOMMAND
    # ========================================================================
    init_parser = subparsers.add_parser(
        'init',
        help='Create a new scenario file',
        description='Write a template scenario file describing a small graph'
    )

    init_parser.add_argument(
        '--force', '-f',
        action='store_true',
        help='Overwrite an existing scenario file'
    )

    init_parser.add_argument(
        '--path', '-p',
        type=str,
        help='Custom path for the scenario file (default: ./netpath.yaml)'
    )

    # ========================================================================
    # RUN SUBCOMMAND
    # ========================================================================
    run_parser = subparsers.add_parser(
        'run',
        help='Build a graph and search it',
        description='Run a scenario file or a built-in scenario'
    )

    run_parser.add_argument(
        'config_file',
        nargs='?',
        help='Path to YAML scenario file (optional, will auto-discover)'
    )

    run_parser.add_argument(
        '--scenario', '-s',
        choices=list_scenarios(),
        help='Run a built-in scenario instead of a scenario file'
    )

    run_parser.add_argument(
        '--heuristic',
        choices=list_heuristics(),
        help='Override the heuristic used by the search'
    )

    run_parser.add_argument(
        '--output-dir', '-o',
        type=str,
        help='Directory for exported results'
    )

    run_parser.add_argument(
        '--format',
        dest='formats',
        action='append',
        choices=SUPPORTED_FORMATS,
        help='Export format (repeatable; default from scenario file, else json)'
    )

    run_parser.add_argument(
        '--no-export',
        action='store_true',
        help='Print the path without writing any files'
    )

    run_parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Console logging level (default: from scenario file, else INFO)'
    )

    run_parser.add_argument(
        '--log-file',
        type=str,
        help='Also write a DEBUG-level log to this file'
    )

    # ========================================================================
    # LIST SUBCOMMAND
    # ========================================================================
    subparsers.add_parser(
        'list',
        help='List built-in scenarios and heuristics',
        description='Show the registered scenarios and heuristics'
    )

    return parser
