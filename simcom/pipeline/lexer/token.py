"""
Token definitions for the declaration language.

Tokens carry no position information (line/column), only their kind and,
for identifiers, their text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Kind of lexical token."""

    ILLEGAL = "Illegal"  # Any character we don't recognize
    EOF = "EOF"  # End of input, never yielded by the lexer iterator
    IDENT = "Ident"  # A variable name, a type name...
    LPAREN = "ParL"
    RPAREN = "ParR"
    COLON = "Colon"
    SEMICOLON = "Semicolon"
    COMMA = "Comma"
    TYPE = "Type"  # The `tipo` keyword


@dataclass(frozen=True)
class Token:
    """A lexical token. Only identifiers carry text."""

    kind: TokenKind
    text: str = ""

    @staticmethod
    def ident(text: str) -> Token:
        """Build an identifier token."""
        return Token(TokenKind.IDENT, text)

    @property
    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF

    def __repr__(self) -> str:
        if self.kind is TokenKind.IDENT:
            return f'{self.kind.value}("{self.text}")'
        return self.kind.value

    __str__ = __repr__


ILLEGAL = Token(TokenKind.ILLEGAL)
EOF = Token(TokenKind.EOF)
LPAREN = Token(TokenKind.LPAREN)
RPAREN = Token(TokenKind.RPAREN)
COLON = Token(TokenKind.COLON)
SEMICOLON = Token(TokenKind.SEMICOLON)
COMMA = Token(TokenKind.COMMA)
TYPE = Token(TokenKind.TYPE)

# Reserved words, matched exactly against a complete identifier
KEYWORDS: dict[str, Token] = {
    "tipo": TYPE,
}
