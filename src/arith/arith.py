"""Main Arith class: evaluates arithmetic expressions."""

import logging

from arith.arith_ast import ArithNode
from arith.arith_error import ArithError
from arith.arith_evaluator import ArithEvaluator
from arith.arith_lexer import ArithLexer
from arith.arith_parser import ArithParser


class Arith:
    """
    Arithmetic expression calculator.

    Supports decimal literals, the binary operators + - * /, unary + and -,
    and parentheses, with the usual precedence and left-to-right
    associativity.  Every call builds a fresh lexer and parser, so a single
    instance may be reused and shared.
    """

    def __init__(self, max_depth: int = 100):
        """
        Initialize calculator.

        Args:
            max_depth: Maximum nesting of parentheses and unary signs

        Raises:
            ValueError: If max_depth is outside 1 to ArithParser.MAX_DEPTH_LIMIT
        """
        if not 1 <= max_depth <= ArithParser.MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be between 1 and {ArithParser.MAX_DEPTH_LIMIT}, got {max_depth}")

        self.max_depth = max_depth
        self._logger = logging.getLogger("Arith")

    def parse(self, expression: str) -> ArithNode:
        """
        Parse an expression into its tree without evaluating it.

        Args:
            expression: Expression string to parse

        Returns:
            Root node of the expression tree

        Raises:
            ArithLexError: If the expression contains an invalid character
            ArithParseError: If the tokens do not form a valid expression
        """
        lexer = ArithLexer()
        lexer.prime(expression)

        parser = ArithParser(lexer, expression, max_depth=self.max_depth)
        return parser.parse()

    def evaluate(self, expression: str) -> float:
        """
        Evaluate an expression.

        Args:
            expression: Expression string to evaluate

        Returns:
            The numeric result

        Raises:
            ArithLexError: If the expression contains an invalid character
            ArithParseError: If the tokens do not form a valid expression
        """
        try:
            tree = self.parse(expression)

        except ArithError as e:
            self._logger.debug("Rejected expression %r: %s", expression, e.message)
            raise

        result = ArithEvaluator().evaluate(tree)
        self._logger.debug("Evaluated %r to %r", expression, result)
        return result

    def evaluate_and_format(self, expression: str) -> str:
        """
        Evaluate an expression and return the formatted result.

        Args:
            expression: Expression string to evaluate

        Returns:
            String representation of the result

        Raises:
            ArithLexError: If the expression contains an invalid character
            ArithParseError: If the tokens do not form a valid expression
        """
        return ArithEvaluator().format_result(self.evaluate(expression))
