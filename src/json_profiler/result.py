"""Result dataclasses returned by the analysis engine.

Every type here is plain data: no live references, no callbacks.  Each offers
``to_dict()`` producing JSON-serializable output with the camelCase keys of
the external result record, so the presentation layer can render or export it
unmodified.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from json_profiler.tree.builder import to_python
from json_profiler.tree.nodes import Value

if TYPE_CHECKING:
    from json_profiler.analysis.schema import Schema

__all__ = [
    "AnalysisResult",
    "ComparisonError",
    "ComparisonResult",
    "LengthSummary",
    "Statistics",
    "StructuralProfile",
    "ValidationReport",
    "ValueChange",
]


@dataclass(frozen=True, slots=True)
class StructuralProfile:
    """Depth and per-category node counts of one document.

    Attributes:
        top_level_type: Kind name of the root node ("object", "array", ...).
        max_depth: Deepest level reached; the root is depth 0.
        object_count: Number of object nodes, root included.
        array_count: Number of array nodes, root included.
        primitive_count: Number of null/boolean/number/string leaves.
        key_count: Sum of every object's own key count (not de-duplicated).
    """

    top_level_type: str
    max_depth: int
    object_count: int
    array_count: int
    primitive_count: int
    key_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "topLevelType": self.top_level_type,
            "maxDepth": self.max_depth,
            "objectCount": self.object_count,
            "arrayCount": self.array_count,
            "primitiveCount": self.primitive_count,
            "keyCount": self.key_count,
        }


@dataclass(frozen=True, slots=True)
class LengthSummary:
    """Summary of a length distribution.  All but ``count`` are None when empty."""

    count: int
    min: int | None = None
    max: int | None = None
    mean: float | None = None
    median: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "min": self.min,
            "max": self.max,
            "mean": self.mean,
            "median": self.median,
        }


@dataclass(frozen=True, slots=True)
class Statistics:
    """Key, type and length distributions of one document.

    Attributes:
        total_keys: Every object key occurrence across the whole tree.
        unique_keys: Distinct key names seen anywhere, regardless of nesting.
        null_values: Number of null leaves.
        empty_strings: Number of strings that are exactly "".
        type_histogram: Node count per kind name, in first-seen order.
        array_lengths: One length per array node, in traversal order.
        string_lengths: One length per string leaf, in traversal order.
        array_length_summary: Numeric summary of ``array_lengths``.
        string_length_summary: Numeric summary of ``string_lengths``.
    """

    total_keys: int
    unique_keys: int
    null_values: int
    empty_strings: int
    type_histogram: dict[str, int]
    array_lengths: list[int]
    string_lengths: list[int]
    array_length_summary: LengthSummary
    string_length_summary: LengthSummary

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalKeys": self.total_keys,
            "uniqueKeys": self.unique_keys,
            "nullValues": self.null_values,
            "emptyStrings": self.empty_strings,
            "typeHistogram": dict(self.type_histogram),
            "arrayLengths": list(self.array_lengths),
            "stringLengths": list(self.string_lengths),
            "arrayLengthSummary": self.array_length_summary.to_dict(),
            "stringLengthSummary": self.string_length_summary.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Diagnostics computed from the raw text of a document.

    Attributes:
        is_valid: True when ``errors`` is empty.  Duplicate keys are reported
            as diagnostics and do not affect validity.
        errors: Human-readable problems (non-standard literals, syntax errors).
        duplicate_keys: Key names seen more than once, each reported once.
        duplicate_scope: ``"document"`` when duplicates are counted across the
            whole text (an approximation: a key repeated in two different
            objects is reported), ``"object"`` when only same-object repeats
            are reported.
    """

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    duplicate_keys: list[str] = field(default_factory=list)
    duplicate_scope: str = "document"

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "duplicateKeys": list(self.duplicate_keys),
            "duplicateScope": self.duplicate_scope,
        }


@dataclass(frozen=True, slots=True)
class ValueChange:
    """A path present in both documents whose values differ."""

    path: str
    first: Value
    second: Value

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "first": to_python(self.first),
            "second": to_python(self.second),
        }


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Presence/value diff of two documents keyed by path.

    Attributes:
        only_in_first: Paths present only in the first document.
        only_in_second: Paths present only in the second document.
        changed: Shared paths whose values are not deeply equal.
        structural_diff: True iff either ``only_in_*`` list is non-empty.
            Value changes at shared paths never set it.
    """

    only_in_first: list[str]
    only_in_second: list[str]
    changed: list[ValueChange]
    structural_diff: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "onlyInFirst": list(self.only_in_first),
            "onlyInSecond": list(self.only_in_second),
            "changed": [change.to_dict() for change in self.changed],
            "structuralDiff": self.structural_diff,
        }


@dataclass(frozen=True, slots=True)
class ComparisonError:
    """Why the optional comparison document could not be parsed."""

    message: str
    position: int | None = None
    line: int | None = None
    column: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "position": self.position,
            "line": self.line,
            "column": self.column,
        }


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Everything the engine computes for one analysis call.

    ``comparison`` and ``comparison_error`` are mutually exclusive; both are
    None when no comparison document was supplied.
    """

    structure: StructuralProfile
    schema: Schema
    validation: ValidationReport
    statistics: Statistics
    paths: list[str]
    comparison: ComparisonResult | None = None
    comparison_error: ComparisonError | None = None
    computation_time_ms: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "structure": self.structure.to_dict(),
            "schema": self.schema.to_dict(),
            "validation": self.validation.to_dict(),
            "statistics": self.statistics.to_dict(),
            "paths": list(self.paths),
        }
        if self.comparison is not None:
            record["comparison"] = self.comparison.to_dict()
        if self.comparison_error is not None:
            record["comparisonError"] = self.comparison_error.to_dict()
        record["computationTimeMs"] = self.computation_time_ms
        return record
