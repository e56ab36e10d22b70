"""
Main entry point for the arithmetic evaluator when run as a module.
"""

import sys

from arith.arith_cli import main

if __name__ == '__main__':
    sys.exit(main())
