"""Plain-text report and export record for an AnalysisResult.

Both functions only read the result; they never re-run an analysis.  ``now``
is injectable so output is reproducible in tests.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from json_profiler.analyzer import has_comparison_text
from json_profiler.result import AnalysisResult

__all__ = ["export_record", "format_report"]

_RULE = "=" * 50


def _mark(flag: bool) -> str:
    return "✅" if flag else "❌"


def format_report(result: AnalysisResult, now: datetime | None = None) -> str:
    """Render a human-readable report of an analysis.

    Sections: STRUCTURE ANALYSIS, VALIDATION, STATISTICS, COMPARISON RESULTS
    (only when a comparison document was supplied) and GENERATED SCHEMA.
    """
    now = now if now is not None else datetime.now(timezone.utc)
    structure = result.structure
    validation = result.validation
    stats = result.statistics

    lines = [
        f"JSON Analysis Report - {now.isoformat(timespec='seconds')}",
        _RULE,
        "",
        "STRUCTURE ANALYSIS:",
        f"- Type: {structure.top_level_type}",
        f"- Max Depth: {structure.max_depth}",
        f"- Objects: {structure.object_count}",
        f"- Arrays: {structure.array_count}",
        f"- Primitives: {structure.primitive_count}",
        f"- Total Keys: {structure.key_count}",
        "",
        "VALIDATION:",
        f"- Valid JSON: {_mark(validation.is_valid)}",
    ]
    if validation.errors:
        lines.append(f"- Errors: {', '.join(validation.errors)}")
    if validation.duplicate_keys:
        note = " (approximate: counted across the whole document)" if (
            validation.duplicate_scope == "document"
        ) else ""
        lines.append(f"- Duplicate Keys: {', '.join(validation.duplicate_keys)}{note}")

    histogram = ", ".join(f"{kind}({count})" for kind, count in stats.type_histogram.items())
    lines += [
        "",
        "STATISTICS:",
        f"- Total Keys: {stats.total_keys}",
        f"- Unique Keys: {stats.unique_keys}",
        f"- Null Values: {stats.null_values}",
        f"- Empty Strings: {stats.empty_strings}",
        f"- Data Types: {histogram}",
        "",
    ]

    if result.comparison is not None:
        comparison = result.comparison
        lines += [
            "COMPARISON RESULTS:",
            f"- Structural Difference: {_mark(comparison.structural_diff)}",
            f"- Only in First: {len(comparison.only_in_first)} paths",
            f"- Only in Second: {len(comparison.only_in_second)} paths",
            f"- Different Values: {len(comparison.changed)} paths",
            "",
        ]
    elif result.comparison_error is not None:
        lines += [
            "COMPARISON RESULTS:",
            f"- Comparison document is invalid: {result.comparison_error.message}",
            "",
        ]

    lines.append("GENERATED SCHEMA:")
    lines.append(json.dumps(result.schema.to_dict(), indent=2, ensure_ascii=False))
    return "\n".join(lines)


def export_record(
    result: AnalysisResult,
    primary: str,
    secondary: str | None = None,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Build the JSON export payload: timestamp, result record and raw inputs.

    ``secondary`` is recorded under the same rule the analyzer applies: blank
    comparison text is no comparison at all.
    """
    now = now if now is not None else datetime.now(timezone.utc)
    inputs: dict[str, str] = {"primary": primary}
    if has_comparison_text(secondary):
        inputs["secondary"] = secondary
    return {
        "timestamp": now.isoformat(),
        "analysisResult": result.to_dict(),
        "inputs": inputs,
    }
