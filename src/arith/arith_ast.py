"""Arithmetic AST node types.

The node set is closed: a tree is built only from `ArithNumberNode`,
`ArithUnaryNode` and `ArithBinaryNode`.  Nodes are immutable and carry no
behaviour beyond describing themselves; evaluation lives in
`ArithEvaluator`, which dispatches on the node type.

Each node optionally records the position of the source token that produced
it, for diagnostics only.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union


class ArithOperator(Enum):
    """Operators understood by the evaluator."""
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    NEGATE = "neg"

    @property
    def symbol(self) -> str:
        """Source symbol for the operator."""
        return OPERATOR_SYMBOLS[self]


OPERATOR_SYMBOLS = {
    ArithOperator.ADD: "+",
    ArithOperator.SUB: "-",
    ArithOperator.MUL: "*",
    ArithOperator.DIV: "/",
    ArithOperator.NEGATE: "-",
}


@dataclass(frozen=True)
class ArithASTNode(ABC):
    """Abstract base class for all arithmetic AST nodes."""
    position: int | None = field(default=None, kw_only=True, compare=False)

    @abstractmethod
    def _describe_parts(self) -> List[Union[str, 'ArithASTNode']]:
        """Text fragments and child nodes making up this node's rendering, in order."""

    def describe(self) -> str:
        """
        Render the subtree as a fully parenthesized expression.

        Uses an explicit work stack, so trees of any depth can be rendered.

        Returns:
            Rendering such as '((10 - 5) - 2)' or '(-(10 + 20) * 30)'
        """
        output: List[str] = []
        work: List[Union[str, ArithASTNode]] = [self]

        while work:
            item = work.pop()
            if isinstance(item, str):
                output.append(item)
                continue

            work.extend(reversed(item._describe_parts()))

        return "".join(output)


@dataclass(frozen=True)
class ArithNumberNode(ArithASTNode):
    """A numeric literal."""
    value: float

    def _describe_parts(self) -> List[Union[str, ArithASTNode]]:
        if self.value.is_integer():
            return [str(int(self.value))]

        return [repr(self.value)]


@dataclass(frozen=True)
class ArithUnaryNode(ArithASTNode):
    """A prefix operator applied to a single operand."""
    operator: ArithOperator
    operand: 'ArithNode'

    def _describe_parts(self) -> List[Union[str, ArithASTNode]]:
        return [self.operator.symbol, self.operand]


@dataclass(frozen=True)
class ArithBinaryNode(ArithASTNode):
    """An infix operator applied to two operands."""
    operator: ArithOperator
    left: 'ArithNode'
    right: 'ArithNode'

    def _describe_parts(self) -> List[Union[str, ArithASTNode]]:
        return ["(", self.left, f" {self.operator.symbol} ", self.right, ")"]


ArithNode = Union[ArithNumberNode, ArithUnaryNode, ArithBinaryNode]
