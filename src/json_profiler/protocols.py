"""SyntaxValidator Protocol: the extension point for raw-text validation.

The analysis pipeline only depends on this structural interface, so a
validator with different duplicate-key semantics can be swapped in without
touching the rest of the engine.  No inheritance is required; any class with
a conformant ``validate`` method passes ``isinstance`` checks.

Example::

    from json_profiler.protocols import SyntaxValidator
    from json_profiler.result import ValidationReport

    class AlwaysValid:
        def validate(self, raw_text: str) -> ValidationReport:
            return ValidationReport(is_valid=True)

    assert isinstance(AlwaysValid(), SyntaxValidator)  # True, structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_profiler.result import ValidationReport


@runtime_checkable
class SyntaxValidator(Protocol):
    """Structural protocol for raw-text validators.

    The ``validate`` method must:
    - Accept the raw, unparsed document text.
    - Never raise for malformed input; problems go into the report.
    - Return a ``ValidationReport``.
    """

    def validate(self, raw_text: str) -> ValidationReport: ...
