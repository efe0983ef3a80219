"""
Reporter module.

Renders analysis results and parse errors.
"""

from __future__ import annotations

from .reporter import Reporter

__all__ = ["Reporter"]
