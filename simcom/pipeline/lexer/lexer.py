"""
Lexer that turns source text into tokens.

Phase 1 of the pipeline: a single pass over the characters with one
character of lookahead. Nothing is fatal here; unknown characters become
Illegal tokens and are left for the parser to report.
"""

from __future__ import annotations

from collections.abc import Iterator

from .token import (
    COLON,
    COMMA,
    EOF,
    ILLEGAL,
    KEYWORDS,
    LPAREN,
    RPAREN,
    SEMICOLON,
    Token,
)

# Single-character punctuation
PUNCTUATION: dict[str, Token] = {
    "(": LPAREN,
    ")": RPAREN,
    ":": COLON,
    ";": SEMICOLON,
    ",": COMMA,
}

DIGITS = frozenset("0123456789")


class Lexer:
    """Iterator over the tokens of a source string.

    The lexer is consumed as it goes: iterating it a second time yields
    nothing. Build a new Lexer to start over.

    Example:
        >>> list(Lexer(": tipo"))
        [Colon, Type]
    """

    def __init__(self, source: str):
        """
        Initialize the lexer.

        Args:
            source: Complete source text, already decoded
        """
        self.source = source
        self.position = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token.is_eof:
            raise StopIteration
        return token

    def _peek_char(self) -> str | None:
        """The next char in the input, without advancing."""
        if self.position < len(self.source):
            return self.source[self.position]
        return None

    def _read_char(self) -> str | None:
        """The next char in the input, advancing past it."""
        ch = self._peek_char()
        if ch is not None:
            self.position += 1
        return ch

    def _skip_whitespace(self) -> None:
        while (ch := self._peek_char()) is not None and ch.isspace():
            self.position += 1

    def _read_identifier(self) -> Token:
        """Read the rest of an identifier whose first char was already consumed."""
        start = self.position - 1
        while (ch := self._peek_char()) is not None and (ch.isalpha() or ch in DIGITS):
            self.position += 1

        content = self.source[start : self.position]
        return KEYWORDS.get(content) or Token.ident(content)

    def next_token(self) -> Token:
        """
        Produce the next token.

        Returns:
            The next token, or EOF once the input is exhausted (or a NUL
            character is found). Keeps returning EOF afterwards.
        """
        self._skip_whitespace()
        ch = self._read_char()

        if ch is None:
            return EOF
        if ch == "\0":
            # Anything after an embedded NUL is ignored
            self.position = len(self.source)
            return EOF
        if ch in PUNCTUATION:
            return PUNCTUATION[ch]
        if ch.isalpha():
            return self._read_identifier()
        return ILLEGAL


def tokenize(source: str) -> list[Token]:
    """Tokenize a whole source string."""
    return list(Lexer(source))
