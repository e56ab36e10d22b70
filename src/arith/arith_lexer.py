"""Pull-based lexer for arithmetic expressions with detailed error messages."""

from typing import Dict, List

from arith.arith_error import ArithLexError
from arith.arith_token import ArithToken, ArithTokenType


class ArithLexer:
    """
    Lexes arithmetic expressions one token at a time.

    The lexer holds exactly one current token.  The parser reads it through
    `current_token` and asks for the next one with `next_token()`, so only
    a single token of lookahead is ever materialized.
    """

    SINGLE_CHAR_TOKENS: Dict[str, ArithTokenType] = {
        '+': ArithTokenType.PLUS,
        '-': ArithTokenType.MINUS,
        '*': ArithTokenType.STAR,
        '/': ArithTokenType.SLASH,
        '(': ArithTokenType.LPAREN,
        ')': ArithTokenType.RPAREN,
    }

    # Suggestions for characters people commonly expect to work
    CHARACTER_SUGGESTIONS: Dict[str, str] = {
        '^': "Exponentiation is not supported - use repeated multiplication, e.g. 2 * 2 * 2",
        '%': "Modulo is not supported - only + - * / are available",
        '[': "Use parentheses ( ) for grouping, not brackets [ ]",
        ']': "Use parentheses ( ) for grouping, not brackets [ ]",
        '{': "Use parentheses ( ) for grouping, not braces { }",
        '}': "Use parentheses ( ) for grouping, not braces { }",
        ',': "Digit group separators are not supported - write 1000 rather than 1,000",
        'x': "Use * for multiplication",
        'X': "Use * for multiplication",
        '\t': "Only the space character may separate tokens",
        '\n': "Expressions must fit on a single line",
    }

    def __init__(self) -> None:
        """Initialize an unprimed lexer positioned at the end of an empty input."""
        self._input = ""
        self._position = 0
        self._current_char: str | None = None
        self._current_token = ArithToken(ArithTokenType.EOF, None, 0, 0)

    @property
    def current_token(self) -> ArithToken:
        """The most recently scanned token."""
        return self._current_token

    @property
    def position(self) -> int:
        """Index of the current character in the input."""
        return self._position

    def prime(self, text: str) -> None:
        """
        Reset the lexer over a fresh input string and scan its first token.

        Args:
            text: The expression string to lex

        Raises:
            ArithLexError: If the first token is invalid
        """
        self._input = text
        self._position = 0
        self._current_char = text[0] if text else None
        self._current_token = ArithToken(ArithTokenType.EOF, None, 0, 0)
        self.next_token()

    def tokenize(self, text: str) -> List[ArithToken]:
        """
        Lex a whole expression into a list of tokens.

        Args:
            text: The expression string to lex

        Returns:
            List of tokens, always terminated by an EOF token

        Raises:
            ArithLexError: If any character does not begin a valid token
        """
        self.prime(text)
        tokens = [self._current_token]
        while self._current_token.type != ArithTokenType.EOF:
            tokens.append(self.next_token())

        return tokens

    def next_token(self) -> ArithToken:
        """
        Scan the token starting at the current character and make it current.

        Returns:
            The newly scanned token

        Raises:
            ArithLexError: If the current character does not begin a valid token
        """
        while self._current_char == ' ':
            self._advance_char()

        start = self._position
        char = self._current_char

        if char is None:
            self._current_token = ArithToken(ArithTokenType.EOF, None, start, 0)
            return self._current_token

        token_type = self.SINGLE_CHAR_TOKENS.get(char)
        if token_type is not None:
            self._advance_char()
            self._current_token = ArithToken(token_type, char, start)
            return self._current_token

        # A number stops at a second '.', which cannot begin a token of its own
        if char == '.' and self._follows_number(start):
            literal = self._input[self._current_token.position:start]
            raise ArithLexError(
                message="Invalid character: '.'",
                position=start,
                received=f"Number literal {literal} followed by another decimal point",
                expected="Digit, operator, parenthesis, or end of input",
                example="Correct: 1.25\nIncorrect: 1.2.5",
                suggestion="Remove the extra decimal point",
                context="A number literal may contain at most one decimal point"
            )

        if self._is_digit(char) or char == '.':
            self._current_token = self._read_number(start)
            return self._current_token

        raise self._invalid_character_error(char, start)

    def _advance_char(self) -> None:
        """Consume one character, switching to the end-of-input sentinel when exhausted."""
        if self._current_char is None:
            return

        self._position += 1
        if self._position < len(self._input):
            self._current_char = self._input[self._position]
            return

        self._current_char = None

    def _follows_number(self, position: int) -> bool:
        """Check whether the current token is a number ending immediately before position."""
        token = self._current_token
        return token.type == ArithTokenType.NUMBER and token.position + token.length == position

    def _is_digit(self, char: str | None) -> bool:
        """Check for an ASCII decimal digit."""
        return char is not None and '0' <= char <= '9'

    def _read_number(self, start: int) -> ArithToken:
        """
        Read a decimal literal: a maximal run of digits with at most one decimal point.

        Args:
            start: Position of the first character of the literal

        Returns:
            NUMBER token carrying the literal's float value

        Raises:
            ArithLexError: If the literal has no digits
        """
        seen_decimal_point = False
        while self._is_digit(self._current_char) or (not seen_decimal_point and self._current_char == '.'):
            if self._current_char == '.':
                seen_decimal_point = True

            self._advance_char()

        literal = self._input[start:self._position]

        if literal == '.':
            raise ArithLexError(
                message="Invalid character: '.'",
                position=start,
                received="Decimal point without any digits",
                expected="Number literal such as 5, 0.5, .5 or 5.",
                example="Correct: 0.5 or .5\nIncorrect: .",
                suggestion="Add digits before or after the decimal point",
                context="A decimal point on its own is not a number"
            )

        return ArithToken(ArithTokenType.NUMBER, float(literal), start, len(literal))

    def _invalid_character_error(self, char: str, position: int) -> ArithLexError:
        """
        Build the error for a character that cannot begin any token.

        Args:
            char: The offending character
            position: Position of the offending character

        Returns:
            ArithLexError describing the character and where it was found
        """
        char_code = ord(char)
        if char_code < 32:
            char_display = f"\\u{char_code:04x}"
            received = f"Control character: {char_display} (code {char_code})"

        else:
            char_display = char
            received = f"Character: {char}"

        return ArithLexError(
            message=f"Invalid character: '{char_display}'",
            position=position,
            received=received,
            expected="Digit, '.', '+', '-', '*', '/', '(', ')' or space",
            example="Correct: (1 + 2) * 3",
            suggestion=self.CHARACTER_SUGGESTIONS.get(char, f"Remove the character '{char_display}'"),
            context="Only numbers, the four arithmetic operators and parentheses are supported"
        )
