"""Arithmetic expression engine: lexer, recursive-descent parser and evaluator."""

# Main API
from arith.arith import Arith

# Exceptions
from arith.arith_error import (
    ArithError, ArithLexError, ArithParseError, ArithTrailingInputError, ArithUnexpectedTokenError,
    ArithUnclosedParenthesisError, ArithNestingError
)

# Expression tree
from arith.arith_ast import ArithOperator, ArithASTNode, ArithNumberNode, ArithUnaryNode, ArithBinaryNode, ArithNode

# Lower-level components (for advanced usage)
from arith.arith_token import ArithToken, ArithTokenType
from arith.arith_lexer import ArithLexer
from arith.arith_parser import ArithParser
from arith.arith_evaluator import ArithEvaluator


_default_arith = Arith()


def evaluate(expression: str) -> float:
    """Evaluate an arithmetic expression with the default configuration."""
    return _default_arith.evaluate(expression)


__all__ = [
    # Main API
    "Arith", "evaluate",

    # Exceptions
    "ArithError", "ArithLexError", "ArithParseError", "ArithTrailingInputError", "ArithUnexpectedTokenError",
    "ArithUnclosedParenthesisError", "ArithNestingError",

    # Expression tree
    "ArithOperator", "ArithASTNode", "ArithNumberNode", "ArithUnaryNode", "ArithBinaryNode", "ArithNode",

    # Lower-level components
    "ArithToken", "ArithTokenType", "ArithLexer", "ArithParser", "ArithEvaluator"
]
