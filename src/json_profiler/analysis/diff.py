"""Diff engine: presence and value comparison of two trees keyed by path.

Algorithm::

    paths_first  = enumerate_paths(first)
    paths_second = enumerate_paths(second)
    only_in_first  = paths_first  - paths_second   (first's enumeration order)
    only_in_second = paths_second - paths_first    (second's enumeration order)
    for p in paths_first & paths_second (first's order):
        if resolve(first, p) != resolve(second, p): changed += (p, v1, v2)
    structural_diff = bool(only_in_first or only_in_second)

``structural_diff`` reflects only the path sets.  A value change at a shared
path shows up in ``changed`` and never sets it.

This is a presence/value diff over the full path set, not a minimum edit
script: a changed container is reported at its own path and at every
changed descendant path.

Equality at shared paths is decided by canonical ids: each node of either
tree gets an integer computed once, bottom-up, from its kind and payload or
from its children's ids (object members as an unordered set).  Structurally
equal nodes share an id, so comparing a container and then each of its
descendants is linear overall and never recurses.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable

from json_profiler.analysis.paths import enumerate_paths
from json_profiler.cache import PathResolver
from json_profiler.config import AnalyzerConfig
from json_profiler.result import ComparisonResult, ValueChange
from json_profiler.tree.builder import ValueBuilder
from json_profiler.tree.nodes import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    Value,
    child_nodes,
)

__all__ = ["diff"]

logger = logging.getLogger(__name__)

_VALUE_TYPES = (JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject)


def diff(
    first: Any,
    second: Any,
    config: AnalyzerConfig | None = None,
) -> ComparisonResult:
    """Compare two documents path by path.

    Args:
        first:  First document, as a ``Value`` or a plain Python JSON value.
        second: Second document, same accepted forms.
        config: Resource bounds and resolver cache size.  Defaults to
            ``AnalyzerConfig()``.

    Returns:
        A ``ComparisonResult``.  ``diff(a, a)`` has empty lists and
        ``structural_diff=False``.
    """
    config = config if config is not None else AnalyzerConfig()
    first_tree = _as_value(first, config)
    second_tree = _as_value(second, config)

    # dict.fromkeys keeps enumeration order while giving O(1) membership.
    paths_first = dict.fromkeys(enumerate_paths(first_tree))
    paths_second = dict.fromkeys(enumerate_paths(second_tree))

    only_in_first = [path for path in paths_first if path not in paths_second]
    only_in_second = [path for path in paths_second if path not in paths_first]

    first_resolver = PathResolver(first_tree, max_cache_size=config.path_cache_size)
    second_resolver = PathResolver(second_tree, max_cache_size=config.path_cache_size)

    canonical = _CanonicalIds()
    changed: list[ValueChange] = []
    for path in paths_first:
        if path not in paths_second:
            continue
        first_value = first_resolver.resolve(path)
        second_value = second_resolver.resolve(path)
        if canonical.of(first_value) != canonical.of(second_value):
            changed.append(ValueChange(path=path, first=first_value, second=second_value))

    logger.debug(
        "diff: %d only in first, %d only in second, %d changed",
        len(only_in_first),
        len(only_in_second),
        len(changed),
    )
    return ComparisonResult(
        only_in_first=only_in_first,
        only_in_second=only_in_second,
        changed=changed,
        structural_diff=bool(only_in_first or only_in_second),
    )


def _as_value(document: Any, config: AnalyzerConfig) -> Value:
    if isinstance(document, _VALUE_TYPES):
        return document
    return ValueBuilder(config).build(document)


class _CanonicalIds:
    """Assigns equal integers to structurally equal nodes, across trees.

    Equality follows the Value model: kinds must match, ``1 == 1.0``, arrays
    compare in order and objects ignore key order.
    """

    def __init__(self) -> None:
        # id(node) -> canonical id; the trees outlive this object
        self._ids: dict[int, int] = {}
        self._canonical: dict[Hashable, int] = {}

    def of(self, value: Value) -> int:
        stack: list[tuple[Value, bool]] = [(value, False)]
        while stack:
            node, expanded = stack.pop()
            if id(node) in self._ids:
                continue
            children = child_nodes(node)
            if children and not expanded:
                stack.append((node, True))
                stack.extend((child, False) for child in children)
                continue
            key = self._key(node)
            self._ids[id(node)] = self._canonical.setdefault(key, len(self._canonical))
        return self._ids[id(value)]

    def _key(self, node: Value) -> Hashable:
        if isinstance(node, JsonArray):
            return (node.kind, tuple(self._ids[id(item)] for item in node.items))
        if isinstance(node, JsonObject):
            return (
                node.kind,
                frozenset((key, self._ids[id(member)]) for key, member in node.members.items()),
            )
        if isinstance(node, JsonNull):
            return (node.kind,)
        return (node.kind, node.value)
