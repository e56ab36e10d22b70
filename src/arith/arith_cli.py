"""
Command-line interface for the arithmetic expression evaluator.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from arith.arith import Arith
from arith.arith_error import ArithError
from arith.arith_parser import ArithParser


def setup_logging(level: str) -> None:
    """Configure logging to stderr at the requested level."""
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def create_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="arith",
        description="Evaluate an arithmetic expression",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "(10 + 20) * 30"         # Evaluate the argument
  %(prog)s 10 / 20                  # Arguments are joined with spaces
  %(prog)s -- -10 + 2               # Use -- before a leading minus sign
  echo "-(1 + 2)" | %(prog)s        # Read one line from stdin
        """
    )
    parser.add_argument('expression', nargs='*',
                        help='Expression to evaluate (read from stdin if omitted)')
    parser.add_argument('--max-depth', type=int, default=100,
                        help='Maximum nesting of parentheses and unary signs')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Logging level')
    return parser


def read_expression(args: argparse.Namespace, stdin: TextIO) -> str:
    """Take the expression from the arguments, or from one line of stdin."""
    if args.expression:
        return ' '.join(args.expression)

    return stdin.readline().rstrip('\r\n')


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """Main CLI entry point."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger("ArithCLI")

    if not 1 <= args.max_depth <= ArithParser.MAX_DEPTH_LIMIT:
        parser.error(f"--max-depth must be between 1 and {ArithParser.MAX_DEPTH_LIMIT}")

    expression = read_expression(args, stdin)
    logger.debug("Evaluating expression: %r", expression)

    arith = Arith(max_depth=args.max_depth)
    try:
        result = arith.evaluate_and_format(expression)

    except ArithError as e:
        print(str(e), file=stderr)
        return 1

    print(result, file=stdout)
    return 0
