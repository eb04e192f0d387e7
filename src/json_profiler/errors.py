"""Exception hierarchy for json-profiler.

All errors raised by the engine derive from ``AnalysisError`` so callers can
catch the whole family in one place.  Parse failures additionally subclass
``ValueError`` (as ``json.JSONDecodeError`` does) and path misses subclass
``KeyError``.
"""

from __future__ import annotations

__all__ = [
    "AnalysisError",
    "ComparisonParseError",
    "ParseError",
    "PathNotFoundError",
    "ResourceLimitError",
]


class AnalysisError(Exception):
    """Base class for every error raised by json-profiler."""


class ParseError(AnalysisError, ValueError):
    """The primary document is not valid JSON.

    Attributes:
        message:  The underlying decoder message, without location suffix.
        position: Character offset of the failure, or None when unknown.
        line:     1-based line of the failure, or None when unknown.
        column:   1-based column of the failure, or None when unknown.
    """

    def __init__(
        self,
        message: str,
        position: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.message = message
        self.position = position
        self.line = line
        self.column = column
        if line is not None and column is not None:
            super().__init__(f"Invalid JSON: {message} (line {line}, column {column})")
        else:
            super().__init__(f"Invalid JSON: {message}")


class ComparisonParseError(ParseError):
    """The optional comparison document is not valid JSON."""


class ResourceLimitError(AnalysisError):
    """The document exceeds the configured depth or node-count bounds."""


class PathNotFoundError(AnalysisError, KeyError):
    """A path string does not address any node of the given tree."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(path)

    def __str__(self) -> str:
        return f"path not found: {self.path!r}"
