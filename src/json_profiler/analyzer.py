"""JSONAnalyzer: façade that wires parsing, the four analyses and the diff engine.

This is the only entry point the presentation layer needs.  It turns raw
text into a single, fully serializable ``AnalysisResult``.

Architecture:
- analyze() starts a wall-clock timer and parses the primary text.  A parse
  failure raises ``ParseError`` and aborts the call; no partial result.
- The configured ``SyntaxValidator`` inspects the raw primary text.  Its
  findings are diagnostics and never abort the call.
- Structure, schema, statistics and paths are computed from the parsed tree.
  None of them can fail on a well-formed tree.
- Comparison text that is None, empty or only whitespace means "no
  comparison".  Any other comparison text is parsed separately.  Success yields
  ``AnalysisResult.comparison``; failure yields ``comparison_error`` (or
  raises ``ComparisonParseError`` under ``strict_comparison``).  A failed
  comparison is never reported as an empty diff.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, TypeGuard

from json_profiler.analysis.diff import diff
from json_profiler.analysis.paths import enumerate_paths
from json_profiler.analysis.schema import infer_schema
from json_profiler.analysis.statistics import collect_statistics
from json_profiler.analysis.structure import analyze_structure
from json_profiler.config import AnalyzerConfig
from json_profiler.errors import ComparisonParseError, ParseError
from json_profiler.result import AnalysisResult, ComparisonError, ComparisonResult
from json_profiler.tree.builder import parse
from json_profiler.tree.nodes import Value
from json_profiler.validation import TextualValidator

if TYPE_CHECKING:
    from json_profiler.protocols import SyntaxValidator

__all__ = ["JSONAnalyzer", "has_comparison_text"]

logger = logging.getLogger(__name__)


class JSONAnalyzer:
    """Orchestrator for single-document analysis and two-document comparison.

    Example::

        from json_profiler.analyzer import JSONAnalyzer

        analyzer = JSONAnalyzer()
        result = analyzer.analyze('{"a": 1}', '{"a": 2}')
        result.structure.max_depth          # 1
        result.comparison.structural_diff   # False
        result.comparison.changed[0].path   # "a"
    """

    def __init__(
        self,
        config: AnalyzerConfig | None = None,
        validator: SyntaxValidator | None = None,
    ) -> None:
        """Initialise the analyzer.

        Args:
            config:    Resource bounds and comparison policy.  Defaults to
                ``AnalyzerConfig()``.
            validator: A SyntaxValidator-conformant object.  Defaults to
                ``TextualValidator()``.
        """
        self._config: AnalyzerConfig = config if config is not None else AnalyzerConfig()
        self._validator: SyntaxValidator = (
            validator if validator is not None else TextualValidator()
        )

    @property
    def config(self) -> AnalyzerConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def analyze(
        self, raw_text: str, comparison_text: str | None = None
    ) -> AnalysisResult:
        """Analyze one document and optionally diff it against a second.

        Args:
            raw_text:        Raw primary JSON text.
            comparison_text: Optional raw text of the document to compare with.
                Empty or whitespace-only text counts as absent.

        Returns:
            An ``AnalysisResult`` with every analysis populated.

        Raises:
            ParseError: The primary text is not valid JSON.
            ComparisonParseError: The comparison text is not valid JSON and
                ``config.strict_comparison`` is True.
            ResourceLimitError: A document exceeds the configured bounds.
        """
        t0 = time.perf_counter()

        value = parse(raw_text, self._config)
        validation = self._validator.validate(raw_text)

        comparison: ComparisonResult | None = None
        comparison_error: ComparisonError | None = None
        if has_comparison_text(comparison_text):
            try:
                other = self._parse_comparison(comparison_text)
            except ComparisonParseError as exc:
                if self._config.strict_comparison:
                    raise
                logger.debug("comparison document rejected: %s", exc)
                comparison_error = ComparisonError(
                    message=exc.message,
                    position=exc.position,
                    line=exc.line,
                    column=exc.column,
                )
            else:
                comparison = diff(value, other, self._config)

        result = AnalysisResult(
            structure=analyze_structure(value),
            schema=infer_schema(value),
            validation=validation,
            statistics=collect_statistics(value),
            paths=list(enumerate_paths(value)),
            comparison=comparison,
            comparison_error=comparison_error,
            computation_time_ms=(time.perf_counter() - t0) * 1000.0,
        )
        logger.debug(
            "analyzed %s document: %d paths in %.2f ms",
            result.structure.top_level_type,
            len(result.paths),
            result.computation_time_ms,
        )
        return result

    def compare(self, first_text: str, second_text: str) -> ComparisonResult:
        """Parse two documents and diff them.

        Raises:
            ParseError: The first text is not valid JSON.
            ComparisonParseError: The second text is not valid JSON.
        """
        first = parse(first_text, self._config)
        second = self._parse_comparison(second_text)
        return diff(first, second, self._config)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _parse_comparison(self, text: str) -> Value:
        try:
            return parse(text, self._config)
        except ParseError as exc:
            raise ComparisonParseError(
                exc.message, exc.position, exc.line, exc.column
            ) from exc


def has_comparison_text(text: str | None) -> TypeGuard[str]:
    """True when ``text`` asks for a comparison: not None and not blank."""
    return text is not None and bool(text.strip())
