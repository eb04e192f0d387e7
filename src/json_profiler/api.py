"""Public API functions for json-profiler.

This module provides the three user-facing functions: analyze, compare and
validate.  Each call creates a fresh JSONAnalyzer (or validator) to guarantee
zero global state between calls.
"""

from __future__ import annotations

from typing import Any

from json_profiler.analysis.diff import diff
from json_profiler.analyzer import JSONAnalyzer
from json_profiler.config import AnalyzerConfig
from json_profiler.result import AnalysisResult, ComparisonResult, ValidationReport
from json_profiler.validation import TextualValidator

__all__ = ["analyze", "compare", "validate"]


def analyze(
    raw_text: str,
    comparison_text: str | None = None,
    config: AnalyzerConfig | None = None,
) -> AnalysisResult:
    """Analyze raw JSON text and optionally diff it against a second document.

    Args:
        raw_text:        Raw primary JSON text.
        comparison_text: Optional raw text of a second document.
        config:          Engine configuration.  Defaults to ``AnalyzerConfig()``.

    Returns:
        An ``AnalysisResult`` with structure, schema, validation, statistics,
        paths and (when ``comparison_text`` is given) either ``comparison``
        or ``comparison_error`` populated.

    Raises:
        ParseError: ``raw_text`` is not valid JSON.
    """
    return JSONAnalyzer(config=config).analyze(raw_text, comparison_text)


def compare(
    first: Any,
    second: Any,
    config: AnalyzerConfig | None = None,
) -> ComparisonResult:
    """Diff two already-decoded JSON values (or Value trees) by path.

    Args:
        first:  First JSON value (dict, list, str, int, float, bool, None) or Value.
        second: Second JSON value or Value.
        config: Engine configuration.  Defaults to ``AnalyzerConfig()``.

    Returns:
        A ``ComparisonResult``.
    """
    return diff(first, second, config=config)


def validate(raw_text: str) -> ValidationReport:
    """Run the default textual validator over raw JSON text.

    Never raises for malformed text: problems are reported in the result.
    """
    return TextualValidator().validate(raw_text)
