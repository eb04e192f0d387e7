"""Tests for the SyntaxValidator Protocol (structural conformance)."""

from __future__ import annotations

from json_profiler.analyzer import JSONAnalyzer
from json_profiler.protocols import SyntaxValidator
from json_profiler.result import ValidationReport
from json_profiler.validation import ScopedValidator, TextualValidator


class AlwaysValid:
    """Conforms structurally; no inheritance."""

    def validate(self, raw_text: str) -> ValidationReport:
        return ValidationReport(is_valid=True, errors=[], duplicate_keys=[])


class NoValidate:
    def check(self, raw_text: str) -> bool:
        return True


class TestProtocolConformance:
    def test_builtin_validators_conform(self) -> None:
        assert isinstance(TextualValidator(), SyntaxValidator)
        assert isinstance(ScopedValidator(), SyntaxValidator)

    def test_custom_class_conforms(self) -> None:
        assert isinstance(AlwaysValid(), SyntaxValidator)

    def test_missing_method_does_not_conform(self) -> None:
        assert not isinstance(NoValidate(), SyntaxValidator)


class TestInjection:
    def test_analyzer_uses_injected_validator(self) -> None:
        result = JSONAnalyzer(validator=AlwaysValid()).analyze('{"a": {"a": 1}}')
        assert result.validation.duplicate_keys == []
        assert result.validation.is_valid is True

    def test_analyzer_defaults_to_textual(self) -> None:
        result = JSONAnalyzer().analyze('{"a": {"a": 1}}')
        assert result.validation.duplicate_keys == ["a"]
        assert result.validation.duplicate_scope == "document"
