"""
Analyzer module.

Contains the definition table and the dependency ordering.
"""

from __future__ import annotations

from .analyzer import (
    AnalysisResult,
    DependencyGraph,
    UnexpectedTokensError,
    analyze,
    analyze_definitions,
)
from .definitions import DefinitionTable, build_definition_table

__all__ = [
    "DefinitionTable",
    "build_definition_table",
    "AnalysisResult",
    "DependencyGraph",
    "UnexpectedTokensError",
    "analyze",
    "analyze_definitions",
]
