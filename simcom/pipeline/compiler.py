"""
Compiler front end tying the pipeline phases together.
"""

from __future__ import annotations

import logging

from .analyzer import AnalysisResult, UnexpectedTokensError, analyze
from .config import AnalyzerConfig
from .lexer import Lexer
from .parser import Parser, Program
from .reporter import Reporter

logger = logging.getLogger(__name__)


class Compiler:
    """Runs lexer, parser and dependency analyzer over a source string."""

    def __init__(self, config: AnalyzerConfig | None = None, command_line: str = ""):
        """
        Initialize the compiler.

        Args:
            config: Analysis and reporting configuration
            command_line: Command shown in report headers
        """
        self.config = config or AnalyzerConfig()
        self.reporter = Reporter(self.config, command_line)

    def parse(self, source: str) -> Program:
        """Phases 1-2: tokenize and parse, keeping every statement."""
        return Program(statements=list(Parser(Lexer(source))))

    def compile(self, source: str) -> AnalysisResult:
        """
        Phases 1-3: tokenize, parse and analyze.

        Raises:
            UnexpectedTokensError: if any statement failed to parse
        """
        program = self.parse(source)
        result = analyze(program.statements, self.config)
        logger.info(
            "Analyzed %d definition(s): %d ordered, %d in cycles",
            len(result.definitions),
            len(result.order),
            len(result.cycles),
        )
        return result

    def report(self, source: str) -> tuple[str, bool]:
        """
        Compile and render the outcome.

        Returns:
            The rendered report (or error report) and whether it succeeded
        """
        try:
            result = self.compile(source)
        except UnexpectedTokensError as e:
            return self.reporter.render_errors(e.tokens), False
        return self.reporter.render(result), True
