"""TextualValidator: diagnostics computed from the raw document text.

Three checks, none of which touches the parsed Value tree:

1. Duplicate keys: every ``"key":`` occurrence in the whole text is matched
   with ``"([^"]+)"\\s*:`` and any key name seen more than once anywhere is
   reported.  This is a whole-document over-approximation: ``{"a": {"a": 1}}``
   reports ``a`` even though no object repeats a key.  The report marks it
   with ``duplicate_scope="document"``.
2. Non-standard literals: ``NaN``, ``Infinity`` and ``undefined`` appearing
   outside string literals.
3. Syntax: the decoder's message when the text is not JSON at all.

Duplicate keys are diagnostics only; ``is_valid`` depends on ``errors``.
"""

from __future__ import annotations

import json
import re

from json_profiler.result import ValidationReport

__all__ = ["TextualValidator", "literal_token_errors", "syntax_errors"]

_KEY_RE = re.compile(r'"([^"]+)"\s*:')

# A JSON string literal, escapes included.
_STRING_RE = re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL)

# (token, message) in reporting order
_LITERAL_TOKENS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bNaN\b"), "Contains NaN values"),
    (re.compile(r"\bInfinity\b"), "Contains Infinity values"),
    (re.compile(r"\bundefined\b"), "Contains undefined values"),
)


def literal_token_errors(raw_text: str) -> list[str]:
    """Report NaN / Infinity / undefined tokens that appear unquoted."""
    unquoted = _STRING_RE.sub('""', raw_text)
    return [message for pattern, message in _LITERAL_TOKENS if pattern.search(unquoted)]


def syntax_errors(raw_text: str) -> list[str]:
    """Report the decoder's error, if the text is not parseable JSON.

    Non-standard constants are tolerated here; they are reported by
    ``literal_token_errors`` instead.
    """
    try:
        json.loads(raw_text)
    except json.JSONDecodeError as exc:
        return [f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})"]
    except RecursionError:
        return ["Invalid JSON: nesting too deep to check syntax"]
    return []


class TextualValidator:
    """Whole-document textual validator (the default ``SyntaxValidator``).

    Example::

        report = TextualValidator().validate('{"a": {"a": 1}}')
        report.is_valid         # True
        report.duplicate_keys   # ["a"]
    """

    def validate(self, raw_text: str) -> ValidationReport:
        seen: set[str] = set()
        duplicates: dict[str, None] = {}
        for match in _KEY_RE.finditer(raw_text):
            key = match.group(1)
            if key in seen:
                duplicates.setdefault(key, None)
            seen.add(key)

        errors = literal_token_errors(raw_text) + syntax_errors(raw_text)
        return ValidationReport(
            is_valid=not errors,
            errors=errors,
            duplicate_keys=list(duplicates),
            duplicate_scope="document",
        )
