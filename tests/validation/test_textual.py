"""Tests for TextualValidator and the shared token/syntax checks."""

from __future__ import annotations

import pytest

from json_profiler.validation.textual import (
    TextualValidator,
    literal_token_errors,
    syntax_errors,
)


@pytest.fixture
def validator() -> TextualValidator:
    return TextualValidator()


class TestDuplicateKeys:
    def test_nested_reuse_is_reported(self, validator: TextualValidator) -> None:
        """Whole-document scan: the same name in two objects counts."""
        report = validator.validate('{"a": {"a": 1}}')
        assert report.duplicate_keys == ["a"]
        assert report.is_valid is True
        assert report.errors == []
        assert report.duplicate_scope == "document"

    def test_same_object_repeat(self, validator: TextualValidator) -> None:
        assert validator.validate('{"a": 1, "a": 2}').duplicate_keys == ["a"]

    def test_each_duplicate_listed_once_in_detection_order(
        self, validator: TextualValidator
    ) -> None:
        text = '{"id": 1, "x": {"id": 2}, "y": {"id": 3, "x": 4}}'
        assert validator.validate(text).duplicate_keys == ["id", "x"]

    def test_no_duplicates(self, validator: TextualValidator) -> None:
        assert validator.validate('{"a": 1, "b": [{"c": 2}]}').duplicate_keys == []

    def test_whitespace_before_colon(self, validator: TextualValidator) -> None:
        assert validator.validate('{"k"  : 1, "k"\n: 2}').duplicate_keys == ["k"]

    def test_string_values_are_not_keys(self, validator: TextualValidator) -> None:
        assert validator.validate('["a", "a"]').duplicate_keys == []


class TestLiteralTokens:
    def test_nan(self) -> None:
        assert literal_token_errors('{"v": NaN}') == ["Contains NaN values"]

    def test_negative_infinity(self) -> None:
        assert literal_token_errors("[-Infinity]") == ["Contains Infinity values"]

    def test_undefined(self) -> None:
        assert literal_token_errors('{"v": undefined}') == ["Contains undefined values"]

    def test_reporting_order(self) -> None:
        assert literal_token_errors("[undefined, Infinity, NaN]") == [
            "Contains NaN values",
            "Contains Infinity values",
            "Contains undefined values",
        ]

    def test_tokens_inside_strings_are_ignored(self) -> None:
        assert literal_token_errors('{"v": "NaN", "NaN": "undefined"}') == []

    def test_escaped_quotes_do_not_end_strings(self) -> None:
        assert literal_token_errors('{"s": "say \\"NaN\\""}') == []

    def test_substrings_are_not_tokens(self) -> None:
        assert literal_token_errors('{"v": NaNa}') == []


class TestSyntax:
    def test_valid_text(self) -> None:
        assert syntax_errors('{"a": [1, 2]}') == []

    def test_constants_are_left_to_token_check(self) -> None:
        assert syntax_errors("[NaN, Infinity]") == []

    def test_truncated_text(self) -> None:
        errors = syntax_errors('{"a": 1')
        assert len(errors) == 1
        assert errors[0].startswith("Invalid JSON: ")
        assert "(line 1, column 8)" in errors[0]


class TestReport:
    def test_nan_makes_document_invalid(self, validator: TextualValidator) -> None:
        report = validator.validate('{"v": NaN}')
        assert report.is_valid is False
        assert report.errors == ["Contains NaN values"]

    def test_undefined_reports_token_then_syntax(
        self, validator: TextualValidator
    ) -> None:
        report = validator.validate('{"v": undefined}')
        assert report.errors[0] == "Contains undefined values"
        assert report.errors[1].startswith("Invalid JSON: Expecting value")
        assert report.is_valid is False

    def test_never_raises_on_garbage(self, validator: TextualValidator) -> None:
        report = validator.validate("}{")
        assert report.is_valid is False
        assert report.duplicate_keys == []

    def test_deep_text_does_not_raise(self, validator: TextualValidator) -> None:
        report = validator.validate("[" * 100_000 + "]" * 100_000)
        assert isinstance(report.errors, list)
