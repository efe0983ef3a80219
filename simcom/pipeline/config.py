"""
Configuration for the compiler pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass

OUTPUT_FORMATS = ("text", "json")


@dataclass
class AnalyzerConfig:
    """Configuration options for analysis and reporting."""

    # Visit root definitions alphabetically instead of in definition order
    sort_roots: bool = False

    # Keep referenced-but-undefined type names in the emission order
    include_undefined_types: bool = True

    # Report format: "text" or "json"
    output_format: str = "text"

    # Add a header line with the generating command to text reports
    add_generation_comment: bool = True

    @staticmethod
    def from_dict(d: dict) -> AnalyzerConfig:
        """Create a config from a dictionary."""
        config = AnalyzerConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "sort_roots": self.sort_roots,
            "include_undefined_types": self.include_undefined_types,
            "output_format": self.output_format,
            "add_generation_comment": self.add_generation_comment,
        }
