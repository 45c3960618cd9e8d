"""
Entry point for `python -m netpath`
"""
import sys

from netpath.cli import main

if __name__ == '__main__':
    sys.exit(main())
