"""Unit tests for the public API functions: analyze, compare, validate, infer_schema."""

from __future__ import annotations

from typing import Any

import pytest

from json_profiler import (
    AnalysisResult,
    AnalyzerConfig,
    ComparisonResult,
    ParseError,
    ResourceLimitError,
    ValidationReport,
    analyze,
    compare,
    infer_schema,
    validate,
)
from json_profiler.analysis.schema import Schema
from json_profiler.tree import ValueBuilder


def _nested_lists(depth: int, leaf: Any = 0) -> Any:
    document = leaf
    for _ in range(depth):
        document = [document]
    return document


class TestAnalyze:
    """Tests for the analyze() function."""

    def test_returns_analysis_result(self) -> None:
        result = analyze('{"a": 1}')
        assert isinstance(result, AnalysisResult)
        assert result.paths == ["a"]

    def test_with_comparison(self) -> None:
        result = analyze('{"a": 1}', '{"a": 1, "b": 2}')
        assert result.comparison is not None
        assert result.comparison.only_in_second == ["b"]

    def test_config_passthrough(self) -> None:
        with pytest.raises(ResourceLimitError):
            analyze("[[1]]", config=AnalyzerConfig(max_depth=1))

    def test_invalid_primary_raises(self) -> None:
        with pytest.raises(ParseError):
            analyze("not json")


class TestCompare:
    """Tests for the compare() function."""

    def test_identical_values(self) -> None:
        result = compare({"a": [1, 2]}, {"a": [1, 2]})
        assert isinstance(result, ComparisonResult)
        assert result.structural_diff is False
        assert result.changed == []

    def test_value_change(self) -> None:
        result = compare({"a": 1}, {"a": 2})
        assert [change.path for change in result.changed] == ["a"]
        assert result.structural_diff is False

    def test_rejects_non_json_values(self) -> None:
        with pytest.raises(TypeError):
            compare({"a": object()}, {})

    def test_config_passthrough(self) -> None:
        with pytest.raises(ResourceLimitError):
            compare([1, 2, 3], [], config=AnalyzerConfig(max_nodes=2))

    def test_deep_values_beyond_recursion_limit(self) -> None:
        config = AnalyzerConfig(max_depth=5000)
        result = compare(_nested_lists(3000, 1), _nested_lists(3000, 2), config=config)
        assert len(result.changed) == 3000
        assert result.structural_diff is False


class TestInferSchema:
    def test_deep_tree_beyond_recursion_limit(self) -> None:
        tree = ValueBuilder(AnalyzerConfig(max_depth=5000)).build(_nested_lists(3000))
        schema = infer_schema(tree)
        for _ in range(3000):
            assert isinstance(schema.items, Schema)
            schema = schema.items
        assert schema.to_dict() == {"type": "number"}


class TestValidate:
    """Tests for the validate() function."""

    def test_returns_report(self) -> None:
        report = validate('{"a": {"a": 1}}')
        assert isinstance(report, ValidationReport)
        assert report.duplicate_keys == ["a"]
        assert report.is_valid is True

    def test_malformed_text_is_reported_not_raised(self) -> None:
        report = validate('{"a": ')
        assert report.is_valid is False
        assert report.errors
