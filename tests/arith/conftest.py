"""Shared fixtures and utilities for arith tests."""

import math

import pytest

from arith import Arith, ArithLexer, ArithEvaluator


@pytest.fixture
def arith():
    """Create a fresh Arith instance for each test."""
    return Arith()


@pytest.fixture
def arith_custom():
    """Factory for Arith instances with custom configuration."""
    def _create_arith(max_depth: int = 100) -> Arith:
        return Arith(max_depth=max_depth)
    return _create_arith


@pytest.fixture
def lexer():
    """Create an unprimed lexer."""
    return ArithLexer()


@pytest.fixture
def evaluator():
    """Create an evaluator."""
    return ArithEvaluator()


class ArithTestHelpers:
    """Helper utilities for arith testing."""

    @staticmethod
    def assert_evaluates_to(arith: Arith, expression: str, expected: float) -> None:
        """Assert that expression evaluates to exactly the expected float."""
        result = arith.evaluate(expression)
        assert result == expected, f"Expected {expression!r} to evaluate to {expected!r}, got {result!r}"

    @staticmethod
    def assert_tree(arith: Arith, expression: str, expected: str) -> None:
        """Assert that expression parses to the expected parenthesized form."""
        result = arith.parse(expression).describe()
        assert result == expected, f"Expected {expression!r} to parse as '{expected}', got '{result}'"

    @staticmethod
    def assert_same_float(actual: float, expected: float) -> None:
        """Assert bit-level equality, treating NaN as equal to NaN."""
        if math.isnan(expected):
            assert math.isnan(actual), f"Expected nan, got {actual!r}"
            return

        assert actual == expected and math.copysign(1.0, actual) == math.copysign(1.0, expected), \
            f"Expected {expected!r}, got {actual!r}"

    @staticmethod
    def build_nested_parens(depth: int, base_value: str = "1") -> str:
        """Build an expression wrapped in the given number of parentheses."""
        return "(" * depth + base_value + ")" * depth


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return ArithTestHelpers
