"""simcom

A minimal compiler front end for the `tipo` declaration language.
Tokenizes and parses `tipo Name(field: Type, ...);` statements, then
orders the type definitions so each one follows the types it depends on,
setting apart the types involved in dependency cycles.
"""

__version__ = "1.0.0"

from .pipeline import (
    AnalysisResult,
    AnalyzerConfig,
    Compiler,
    Lexer,
    Parser,
    Reporter,
    UnexpectedTokensError,
    analyze,
    parse,
    tokenize,
)

__all__ = [
    "Compiler",
    "AnalyzerConfig",
    "AnalysisResult",
    "UnexpectedTokensError",
    "Lexer",
    "Parser",
    "Reporter",
    "tokenize",
    "parse",
    "analyze",
]
