"""
Pipeline - front end for the `tipo` declaration language.

The source goes through these phases:

1. Phase 1 (Lexer): Turn characters into tokens
2. Phase 2 (Parser): Build type definitions, recovering from bad statements
3. Phase 3 (Analyzer): Order definitions by dependency and find cycles
4. Phase 4 (Reporter): Render the result as text or JSON
"""

from __future__ import annotations

from .analyzer import AnalysisResult, DependencyGraph, UnexpectedTokensError, analyze, analyze_definitions
from .compiler import Compiler
from .config import AnalyzerConfig
from .lexer import Lexer, Token, TokenKind, tokenize
from .parser import Parameter, Parser, Program, TypeDefinition, Unexpected, parse, parse_program
from .reporter import Reporter

__all__ = [
    "Compiler",
    "AnalyzerConfig",
    "Lexer",
    "Token",
    "TokenKind",
    "tokenize",
    "Parser",
    "Parameter",
    "TypeDefinition",
    "Unexpected",
    "Program",
    "parse",
    "parse_program",
    "AnalysisResult",
    "DependencyGraph",
    "UnexpectedTokensError",
    "analyze",
    "analyze_definitions",
    "Reporter",
]
