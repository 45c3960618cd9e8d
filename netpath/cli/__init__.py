"""
CLI utilities for the netpath command
"""

from .argument_parser import setup_argument_parser
from .config_discovery import discover_config
from .init_command import run_init_command
from .run_command import run_run_command, setup_logging
from .output import print_result, format_path
from .main import main

__all__ = [
    'setup_argument_parser',
    'discover_config',
    'run_init_command',
    'run_run_command',
    'setup_logging',
    'print_result',
    'format_path',
    'main'
]
