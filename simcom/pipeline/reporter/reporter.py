"""
Report rendering for analysis results.

Phase 4 of the pipeline: turn an AnalysisResult (or the list of
unexpected tokens that prevented one) into text or JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.analyzer import AnalysisResult
from ..config import OUTPUT_FORMATS, AnalyzerConfig
from ..lexer.token import Token


class Reporter:
    """Renders analysis results in the configured output format."""

    def __init__(self, config: AnalyzerConfig | None = None, command_line: str = ""):
        """
        Initialize the reporter.

        Args:
            config: Analysis configuration (output format, header)
            command_line: Command shown in the text report header
        """
        self.config = config or AnalyzerConfig()
        if self.config.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {self.config.output_format!r} (expected one of {', '.join(OUTPUT_FORMATS)})")
        self.command_line = command_line
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates"
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.report_template = self.jinja_env.get_template("report.txt.jinja2")
        self.errors_template = self.jinja_env.get_template("errors.txt.jinja2")

    def _prepare_context(self, result: AnalysisResult) -> dict[str, Any]:
        cycles = sorted(result.cycles)
        return {
            "order": list(result.order),
            "cycles": cycles,
            "undefined": result.undefined_types,
            "dependencies": {name: result.dependencies_of(name) for name in cycles},
            "definitions": {name: [list(f) for f in fields] for name, fields in result.definitions.items()},
        }

    def render(self, result: AnalysisResult) -> str:
        """
        Render a successful analysis.

        Args:
            result: The analysis result

        Returns:
            The report as a string
        """
        context = self._prepare_context(result)

        if self.config.output_format == "json":
            del context["dependencies"]
            return json.dumps(context, indent=2, ensure_ascii=False) + "\n"

        command_line = self.command_line if self.config.add_generation_comment else ""
        return self.report_template.render(command_line=command_line, **context)

    def render_errors(self, tokens: list[Token]) -> str:
        """Render the unexpected tokens that prevented analysis."""
        if self.config.output_format == "json":
            return json.dumps({"errors": [repr(t) for t in tokens]}, indent=2, ensure_ascii=False) + "\n"

        return self.errors_template.render(tokens=tokens)
