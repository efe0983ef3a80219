"""
Parser module.

Contains the AST node definitions and the statement parser.
"""

from __future__ import annotations

from .nodes import AstNode, Parameter, Program, Statement, TypeDefinition, Unexpected
from .parser import Parser, TokenStream, UnexpectedTokenError, parse, parse_program

__all__ = [
    "AstNode",
    "Parameter",
    "TypeDefinition",
    "Unexpected",
    "Program",
    "Statement",
    "Parser",
    "TokenStream",
    "UnexpectedTokenError",
    "parse",
    "parse_program",
]
