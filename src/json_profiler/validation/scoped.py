"""ScopedValidator: reports only keys repeated within the same object.

A stricter alternative to ``TextualValidator`` for callers that want RFC 8259
duplicate-member semantics.  Duplicates are collected by the decoder's
``object_pairs_hook``, which sees every member of an object before the
decoder collapses repeats, so keys reused in different objects are not
reported.

The literal-token and syntax checks are shared with ``TextualValidator``.
Text that fails to decode yields no duplicate keys.
"""

from __future__ import annotations

import json
from typing import Any

from json_profiler.result import ValidationReport
from json_profiler.validation.textual import literal_token_errors, syntax_errors

__all__ = ["ScopedValidator"]


class ScopedValidator:
    """Same-object duplicate-key validator.

    Example::

        ScopedValidator().validate('{"a": {"a": 1}}').duplicate_keys     # []
        ScopedValidator().validate('{"a": 1, "a": 2}').duplicate_keys    # ["a"]
    """

    def validate(self, raw_text: str) -> ValidationReport:
        errors = literal_token_errors(raw_text) + syntax_errors(raw_text)
        duplicates = self._scan(raw_text)
        return ValidationReport(
            is_valid=not errors,
            errors=errors,
            duplicate_keys=duplicates,
            duplicate_scope="object",
        )

    @staticmethod
    def _scan(raw_text: str) -> list[str]:
        # Hooks run innermost-object first, so keys appear in detection order.
        duplicates: dict[str, None] = {}

        def hook(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
            seen: set[str] = set()
            for key, _ in pairs:
                if key in seen:
                    duplicates.setdefault(key, None)
                seen.add(key)
            return dict(pairs)

        try:
            json.loads(raw_text, object_pairs_hook=hook)
        except (json.JSONDecodeError, RecursionError):
            return []
        return list(duplicates)
