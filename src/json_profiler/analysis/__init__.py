"""analysis subpackage: the four per-document analyses and the diff engine.

Every function here is pure: it reads an immutable Value tree and returns a
fresh result record.  Import from this module (not from sub-modules directly)
to stay on the stable public interface.

Example::

    from json_profiler.analysis import analyze_structure, diff
    from json_profiler.tree import parse

    analyze_structure(parse('{"a": 1}')).max_depth   # 1
    diff({"a": 1}, {"a": 2}).structural_diff          # False
"""

from __future__ import annotations

from json_profiler.analysis.diff import diff
from json_profiler.analysis.paths import (
    enumerate_paths,
    find_path,
    parse_path,
    resolve_path,
)
from json_profiler.analysis.schema import Schema, infer_schema
from json_profiler.analysis.statistics import collect_statistics
from json_profiler.analysis.structure import analyze_structure

__all__ = [
    "Schema",
    "analyze_structure",
    "collect_statistics",
    "diff",
    "enumerate_paths",
    "find_path",
    "infer_schema",
    "parse_path",
    "resolve_path",
]
