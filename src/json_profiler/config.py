"""AnalyzerConfig: immutable engine configuration.

AnalyzerConfig is a frozen dataclass holding resource bounds and the
comparison-error policy.  It is passed explicitly to every component that
needs it; there is no module-level configuration state.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["AnalyzerConfig"]


@dataclass(frozen=True, slots=True)
class AnalyzerConfig:
    """Immutable configuration for the analysis engine.

    Attributes:
        max_depth: Deepest nesting level accepted (root is depth 0).  Documents
            nested deeper raise ``ResourceLimitError``.
        max_nodes: Largest number of Value nodes accepted per document.
        path_cache_size: Entries held by each ``PathResolver`` LRU cache.
        strict_comparison: When True, a malformed comparison document raises
            ``ComparisonParseError``.  When False (default) the error is
            recorded on ``AnalysisResult.comparison_error`` and the primary
            analysis is still returned.
    """

    max_depth: int = 256
    max_nodes: int = 1_000_000
    path_cache_size: int = 1024
    strict_comparison: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
        if self.max_nodes < 1:
            msg = f"max_nodes must be >= 1, got {self.max_nodes}"
            raise ValueError(msg)
        if self.path_cache_size < 1:
            msg = f"path_cache_size must be >= 1, got {self.path_cache_size}"
            raise ValueError(msg)
