"""
Lexer module.

Contains the token definitions and the lexer for the declaration language.
"""

from __future__ import annotations

from .lexer import Lexer, tokenize
from .token import KEYWORDS, Token, TokenKind

__all__ = [
    "Token",
    "TokenKind",
    "KEYWORDS",
    "Lexer",
    "tokenize",
]
