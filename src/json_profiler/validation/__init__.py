"""Validators subpackage for json-profiler.

Two validators satisfy the ``SyntaxValidator`` Protocol structurally:

- ``TextualValidator`` (default): whole-document duplicate-key heuristic.
- ``ScopedValidator``: reports only keys repeated within one object.
"""

from json_profiler.validation.scoped import ScopedValidator
from json_profiler.validation.textual import TextualValidator

__all__ = ["ScopedValidator", "TextualValidator"]
