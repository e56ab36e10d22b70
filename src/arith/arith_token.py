"""Token types and token representation for arithmetic expressions."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ArithTokenType(Enum):
    """Token types for arithmetic expressions."""
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LPAREN = "("
    RPAREN = ")"
    NUMBER = "NUMBER"
    EOF = "EOF"


@dataclass
class ArithToken:
    """Represents a single token in an arithmetic expression."""
    type: ArithTokenType
    value: Any
    position: int
    length: int = 1

    def describe(self) -> str:
        """Describe the token for error messages."""
        if self.type == ArithTokenType.EOF:
            return "end of input"

        if self.type == ArithTokenType.NUMBER:
            return f"number {self.value!r}"

        return f"'{self.value}'"

    def __repr__(self) -> str:
        return f"ArithToken({self.type.name}, {self.value!r}, pos={self.position})"
