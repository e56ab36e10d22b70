"""Recursive-descent parser for arithmetic expressions with detailed error messages."""

from typing import Dict

from arith.arith_ast import ArithBinaryNode, ArithNode, ArithNumberNode, ArithOperator, ArithUnaryNode
from arith.arith_error import (
    ArithNestingError, ArithTrailingInputError, ArithUnclosedParenthesisError, ArithUnexpectedTokenError
)
from arith.arith_lexer import ArithLexer
from arith.arith_token import ArithToken, ArithTokenType


class ArithParser:
    """
    Parses the lexer's token stream into an AST.

    Grammar, one token of lookahead and no backtracking:

        expression     := additive EOF
        additive       := multiplicative ( ('+'|'-') multiplicative )*
        multiplicative := unary ( ('*'|'/') unary )*
        unary          := '+' unary | '-' unary | leaf
        leaf           := NUMBER | '(' additive ')'

    The parser's only state is the lexer's current token plus the nesting
    depth used to stop runaway recursion.
    """

    ADDITIVE_OPERATORS: Dict[ArithTokenType, ArithOperator] = {
        ArithTokenType.PLUS: ArithOperator.ADD,
        ArithTokenType.MINUS: ArithOperator.SUB,
    }

    MULTIPLICATIVE_OPERATORS: Dict[ArithTokenType, ArithOperator] = {
        ArithTokenType.STAR: ArithOperator.MUL,
        ArithTokenType.SLASH: ArithOperator.DIV,
    }

    # Each parenthesis level costs four stack frames; keep well inside the default recursion limit
    MAX_DEPTH_LIMIT = 150

    def __init__(self, lexer: ArithLexer, expression: str = "", max_depth: int = 100):
        """
        Initialize parser over a primed lexer.

        Args:
            lexer: Lexer already primed with the expression
            expression: Original expression string for error context
            max_depth: Maximum nesting of parentheses and unary signs
        """
        self.lexer = lexer
        self.expression = expression
        self.max_depth = max_depth
        self._depth = 0

    @property
    def current_token(self) -> ArithToken:
        """The token the parser is currently looking at."""
        return self.lexer.current_token

    def parse(self) -> ArithNode:
        """
        Parse a complete expression.

        Returns:
            Root node of the expression tree

        Raises:
            ArithLexError: If the lexer meets an invalid character
            ArithParseError: If the token stream does not form an expression
        """
        if self.current_token.type == ArithTokenType.EOF:
            raise ArithUnexpectedTokenError(
                message="Empty expression",
                position=self.current_token.position,
                expected="Number, '+', '-', or '('",
                example="1 + 2",
                suggestion="Provide a complete expression to evaluate",
                context="Expression cannot be empty or contain only spaces"
            )

        self._depth = 0
        try:
            expr = self._parse_additive()

        except RecursionError as e:
            raise ArithNestingError(
                message="Expression nested too deeply to parse",
                suggestion="Simplify the expression or remove redundant signs and parentheses",
                context="Nesting exceeded the interpreter's recursion limit before reaching the configured limit"
            ) from e

        if self.current_token.type != ArithTokenType.EOF:
            token = self.current_token
            raise ArithTrailingInputError(
                message=f"Unexpected {token.describe()} after complete expression",
                position=token.position,
                received=f"Found: {token.describe()}",
                expected="Operator or end of expression",
                example="Correct: 1 * 2\nIncorrect: 1 2",
                suggestion="Insert an operator between the operands or remove the extra input",
                context="Implicit multiplication is not supported"
            )

        return expr

    def _parse_additive(self) -> ArithNode:
        """Parse a left-associative chain of '+' and '-'."""
        left = self._parse_multiplicative()

        while True:
            operator = self.ADDITIVE_OPERATORS.get(self.current_token.type)
            if operator is None:
                return left

            position = self.current_token.position
            self._advance()
            right = self._parse_multiplicative()
            left = ArithBinaryNode(operator, left, right, position=position)

    def _parse_multiplicative(self) -> ArithNode:
        """Parse a left-associative chain of '*' and '/'."""
        left = self._parse_unary()

        while True:
            operator = self.MULTIPLICATIVE_OPERATORS.get(self.current_token.type)
            if operator is None:
                return left

            position = self.current_token.position
            self._advance()
            right = self._parse_unary()
            left = ArithBinaryNode(operator, left, right, position=position)

    def _parse_unary(self) -> ArithNode:
        """
        Parse leading signs.

        A '+' is consumed and dropped.  Each '-' wraps the rest of the
        operand in one negation node.
        """
        token = self.current_token
        if token.type == ArithTokenType.PLUS:
            self._enter(token)
            self._advance()
            operand = self._parse_unary()
            self._leave()
            return operand

        if token.type == ArithTokenType.MINUS:
            self._enter(token)
            self._advance()
            operand = self._parse_unary()
            self._leave()
            return ArithUnaryNode(ArithOperator.NEGATE, operand, position=token.position)

        return self._parse_leaf()

    def _parse_leaf(self) -> ArithNode:
        """Parse a number or a parenthesized sub-expression."""
        token = self.current_token

        if token.type == ArithTokenType.NUMBER:
            self._advance()
            return ArithNumberNode(token.value, position=token.position)

        if token.type == ArithTokenType.LPAREN:
            self._enter(token)
            self._advance()
            node = self._parse_additive()

            if self.current_token.type != ArithTokenType.RPAREN:
                raise self._unclosed_parenthesis_error(token)

            self._advance()
            self._leave()
            return node

        if token.type == ArithTokenType.EOF:
            raise ArithUnexpectedTokenError(
                message="Unexpected end of input",
                position=token.position,
                received="End of input",
                expected="Number or '('",
                example="Correct: 1 + 2\nIncorrect: 1 +",
                suggestion="Complete the expression with a number or parenthesized expression",
                context="Every operator needs an operand after it"
            )

        raise ArithUnexpectedTokenError(
            message=f"Unexpected token: {token.value}",
            position=token.position,
            received=f"Token: {token.describe()} (type: {token.type.name})",
            expected="Number or '('",
            example="Valid operands: 42, 3.5, .5, (1 + 2)",
            suggestion="Check for a missing operand or a misplaced operator or parenthesis",
            context=f"Token {token.describe()} cannot start an operand"
        )

    def _unclosed_parenthesis_error(self, open_token: ArithToken) -> ArithUnclosedParenthesisError:
        """
        Build the error for a '(' whose sub-expression is not followed by ')'.

        Args:
            open_token: The unmatched opening parenthesis

        Returns:
            ArithUnclosedParenthesisError pointing at the opening parenthesis
        """
        found = self.current_token
        snippet = self._get_context_snippet(open_token.position)
        return ArithUnclosedParenthesisError(
            message="Missing closing parenthesis",
            position=open_token.position,
            received=f"Found: {found.describe()} at position {found.position}",
            expected="')'",
            example="Correct: (1 + 2) * 3\nIncorrect: (1 + 2 * 3",
            suggestion="Add ')' to close the parenthesized expression",
            context=f"Opening parenthesis here: {snippet}"
        )

    def _get_context_snippet(self, position: int, length: int = 30) -> str:
        """
        Get a snippet of the expression starting at position for error display.

        Args:
            position: Starting character position
            length: Maximum length of snippet

        Returns:
            Snippet with ellipsis if truncated
        """
        end = min(position + length, len(self.expression))
        snippet = self.expression[position:end]

        if end < len(self.expression):
            snippet += "..."

        return snippet

    def _enter(self, token: ArithToken) -> None:
        """Descend one nesting level, enforcing the depth limit."""
        self._depth += 1
        if self._depth > self.max_depth:
            raise ArithNestingError(
                message=f"Expression nested more than {self.max_depth} levels deep",
                position=token.position,
                received=f"Token: {token.describe()}",
                suggestion="Simplify the expression or remove redundant signs and parentheses",
                context="Each parenthesis and each leading sign adds one level of nesting"
            )

    def _leave(self) -> None:
        """Return from one nesting level."""
        self._depth -= 1

    def _advance(self) -> None:
        """Move to the next token."""
        self.lexer.next_token()
