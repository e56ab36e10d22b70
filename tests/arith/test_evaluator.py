"""Tests for tree evaluation and result formatting."""

import math

import pytest

from arith import ArithBinaryNode, ArithNumberNode, ArithOperator, ArithUnaryNode


def num(value: float) -> ArithNumberNode:
    return ArithNumberNode(value)


class TestArithEvaluator:
    """Test evaluation of hand-built trees."""

    def test_number(self, evaluator):
        """Test that a leaf evaluates to its value."""
        assert evaluator.evaluate(num(2.5)) == 2.5

    def test_negate(self, evaluator):
        """Test negation."""
        assert evaluator.evaluate(ArithUnaryNode(ArithOperator.NEGATE, num(4.0))) == -4.0

    @pytest.mark.parametrize("operator,left,right,expected", [
        (ArithOperator.ADD, 1.5, 2.0, 3.5),
        (ArithOperator.SUB, 1.5, 2.0, -0.5),
        (ArithOperator.MUL, 1.5, 2.0, 3.0),
        (ArithOperator.DIV, 1.5, 2.0, 0.75),
    ])
    def test_binary_operators(self, evaluator, operator, left, right, expected):
        """Test each binary operator."""
        assert evaluator.evaluate(ArithBinaryNode(operator, num(left), num(right))) == expected

    def test_operand_order(self, evaluator):
        """Test that the left subtree is the left operand."""
        tree = ArithBinaryNode(
            ArithOperator.SUB,
            ArithBinaryNode(ArithOperator.DIV, num(8.0), num(2.0)),
            ArithUnaryNode(ArithOperator.NEGATE, num(1.0)),
        )
        assert evaluator.evaluate(tree) == 5.0

    def test_evaluation_is_repeatable(self, evaluator):
        """Test that evaluating the same tree twice gives the same result."""
        tree = ArithBinaryNode(ArithOperator.DIV, num(1.0), num(3.0))
        assert evaluator.evaluate(tree) == evaluator.evaluate(tree)

    @pytest.mark.parametrize("left,right,expected", [
        (1.0, 0.0, math.inf),
        (-1.0, 0.0, -math.inf),
        (1.0, -0.0, -math.inf),
        (-1.0, -0.0, math.inf),
        (math.inf, 0.0, math.inf),
        (0.0, 0.0, math.nan),
        (-0.0, 0.0, math.nan),
        (math.nan, 0.0, math.nan),
        (0.0, 5.0, 0.0),
        (1.0, math.inf, 0.0),
    ])
    def test_ieee_division(self, evaluator, helpers, left, right, expected):
        """Test that division by zero yields infinities and NaN instead of raising."""
        tree = ArithBinaryNode(ArithOperator.DIV, num(left), num(right))
        helpers.assert_same_float(evaluator.evaluate(tree), expected)

    def test_long_left_fold_chain(self, evaluator):
        """Test that a very deep left-folded chain does not exhaust the stack."""
        tree = num(0.0)
        for _ in range(20000):
            tree = ArithBinaryNode(ArithOperator.ADD, tree, num(1.0))

        assert evaluator.evaluate(tree) == 20000.0

    def test_deep_negation_chain(self, evaluator):
        """Test a deep chain of negations built directly."""
        tree = num(3.0)
        for _ in range(5001):
            tree = ArithUnaryNode(ArithOperator.NEGATE, tree)

        assert evaluator.evaluate(tree) == -3.0

    def test_unary_operator_mismatch(self, evaluator):
        """Test that a binary operator in a unary node is rejected."""
        with pytest.raises(ValueError, match="Not a unary operator"):
            evaluator.evaluate(ArithUnaryNode(ArithOperator.ADD, num(1.0)))

    def test_binary_operator_mismatch(self, evaluator):
        """Test that negation in a binary node is rejected."""
        with pytest.raises(ValueError, match="Not a binary operator"):
            evaluator.evaluate(ArithBinaryNode(ArithOperator.NEGATE, num(1.0), num(2.0)))

    def test_unknown_node(self, evaluator):
        """Test that objects outside the node set are rejected."""
        with pytest.raises(TypeError, match="Unknown expression node"):
            evaluator.evaluate("1 + 2")


class TestArithFormatting:
    """Test result formatting."""

    @pytest.mark.parametrize("value,expected", [
        (30.0, "30"),
        (-10.0, "-10"),
        (0.0, "0"),
        (-0.0, "0"),
        (0.25, "0.25"),
        (-0.5, "-0.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e16, "1e+16"),
        (123456789012345.0, "123456789012345"),
        (1e-7, "1e-07"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "nan"),
    ])
    def test_format_result(self, evaluator, value, expected):
        """Test the display form of results."""
        assert evaluator.format_result(value) == expected
