"""Evaluator for arithmetic expression trees."""

import math
from typing import List, Tuple

from arith.arith_ast import ArithBinaryNode, ArithNode, ArithNumberNode, ArithOperator, ArithUnaryNode


class ArithEvaluator:
    """
    Reduces an expression tree to a single float.

    Evaluation walks the tree with an explicit work stack, so a long
    left-folded chain such as 1+1+...+1 is bounded by memory rather than by
    the interpreter's recursion limit.  Operands are always evaluated left
    before right.
    """

    # Whole numbers at or above this magnitude are formatted in exponent form
    INTEGER_FORMAT_LIMIT = 1e16

    def evaluate(self, node: ArithNode) -> float:
        """
        Evaluate an expression tree.

        Args:
            node: Root of the tree to evaluate

        Returns:
            The value of the expression.  Division by zero follows IEEE-754
            and produces an infinity or NaN rather than raising.
        """
        values: List[float] = []
        work: List[Tuple[ArithNode, bool]] = [(node, False)]

        while work:
            current, operands_ready = work.pop()

            if isinstance(current, ArithNumberNode):
                values.append(current.value)
                continue

            if isinstance(current, ArithUnaryNode):
                if not operands_ready:
                    work.append((current, True))
                    work.append((current.operand, False))
                    continue

                values.append(self._apply_unary(current.operator, values.pop()))
                continue

            if isinstance(current, ArithBinaryNode):
                if not operands_ready:
                    # Pushed right first so the left operand is evaluated first
                    work.append((current, True))
                    work.append((current.right, False))
                    work.append((current.left, False))
                    continue

                right = values.pop()
                left = values.pop()
                values.append(self._apply_binary(current.operator, left, right))
                continue

            raise TypeError(f"Unknown expression node: {type(current).__name__}")

        assert len(values) == 1, f"Evaluation left {len(values)} values on the stack"
        return values[0]

    def _apply_unary(self, operator: ArithOperator, operand: float) -> float:
        if operator == ArithOperator.NEGATE:
            return -operand

        raise ValueError(f"Not a unary operator: {operator.name}")

    def _apply_binary(self, operator: ArithOperator, left: float, right: float) -> float:
        if operator == ArithOperator.ADD:
            return left + right

        if operator == ArithOperator.SUB:
            return left - right

        if operator == ArithOperator.MUL:
            return left * right

        if operator == ArithOperator.DIV:
            return self._divide(left, right)

        raise ValueError(f"Not a binary operator: {operator.name}")

    def _divide(self, left: float, right: float) -> float:
        """Divide with IEEE-754 results for a zero divisor instead of ZeroDivisionError."""
        if right != 0.0:
            return left / right

        if left == 0.0 or math.isnan(left):
            return math.nan

        # The sign of the infinity combines the dividend's sign with the zero's sign
        return math.copysign(math.inf, left) * math.copysign(1.0, right)

    def format_result(self, value: float) -> str:
        """
        Format a result for display.

        Args:
            value: The result to format

        Returns:
            Whole numbers without a fractional part, other values in Python's
            shortest round-tripping form, and 'inf', '-inf' or 'nan'
        """
        if math.isnan(value):
            return "nan"

        if math.isinf(value):
            return "inf" if value > 0 else "-inf"

        if value.is_integer() and abs(value) < self.INTEGER_FORMAT_LIMIT:
            return str(int(value))

        return repr(value)
