"""
Entry point for the netpath command line
"""

import sys
from typing import List, Optional

from ..pathfinding import list_heuristics
from ..scenarios import get_scenario_info
from .argument_parser import setup_argument_parser
from .init_command import run_init_command
from .output import print_listing
from .run_command import run_run_command


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments and dispatch to a subcommand

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Exit code
    """
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    if args.command == 'init':
        return run_init_command(force=args.force, path=args.path)

    if args.command == 'list':
        print_listing(get_scenario_info(), list_heuristics())
        return 0

    return run_run_command(
        config_file=args.config_file,
        scenario_name=args.scenario,
        heuristic=args.heuristic,
        output_dir=args.output_dir,
        formats=args.formats,
        no_export=args.no_export,
        log_level=args.log_level,
        log_file=args.log_file
    )


if __name__ == '__main__':
    sys.exit(main())
