"""json-profiler - structural profiling, schema inference and path diffs for JSON."""

from __future__ import annotations

from json_profiler.analysis import (
    Schema,
    analyze_structure,
    collect_statistics,
    enumerate_paths,
    infer_schema,
    resolve_path,
)
from json_profiler.analyzer import JSONAnalyzer
from json_profiler.api import analyze, compare, validate
from json_profiler.config import AnalyzerConfig
from json_profiler.errors import (
    AnalysisError,
    ComparisonParseError,
    ParseError,
    PathNotFoundError,
    ResourceLimitError,
)
from json_profiler.result import AnalysisResult, ComparisonResult, ValidationReport
from json_profiler.tree import parse

__version__: str = "0.1.0"
__all__: list[str] = [
    "AnalysisError",
    "AnalysisResult",
    "AnalyzerConfig",
    "ComparisonParseError",
    "ComparisonResult",
    "JSONAnalyzer",
    "ParseError",
    "PathNotFoundError",
    "ResourceLimitError",
    "Schema",
    "ValidationReport",
    "analyze",
    "analyze_structure",
    "collect_statistics",
    "compare",
    "enumerate_paths",
    "infer_schema",
    "parse",
    "resolve_path",
    "validate",
]
