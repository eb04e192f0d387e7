"""Structural analyzer: depth and per-category node counts.

The walk uses an explicit work stack of ``(node, depth)`` pairs, so documents
nested deeper than the interpreter's recursion limit are still profiled.

Depth semantics::

    root                      -> depth 0
    each child of a container -> parent depth + 1
    max_depth                 =  deepest depth reached by any node

Empty containers count themselves but contribute no deeper level.
"""

from __future__ import annotations

from json_profiler.result import StructuralProfile
from json_profiler.tree.nodes import PRIMITIVE_KINDS, JsonArray, JsonObject, Value

__all__ = ["analyze_structure"]


def analyze_structure(value: Value) -> StructuralProfile:
    """Profile the shape of a Value tree.

    Args:
        value: Root of the document.

    Returns:
        A ``StructuralProfile``.  For ``{"a": 1}``: object, depth 1,
        1 object, 0 arrays, 1 primitive, 1 key.
    """
    max_depth = 0
    object_count = 0
    array_count = 0
    primitive_count = 0
    key_count = 0

    stack: list[tuple[Value, int]] = [(value, 0)]
    while stack:
        node, depth = stack.pop()
        max_depth = max(max_depth, depth)

        if node.kind in PRIMITIVE_KINDS:
            primitive_count += 1
        elif isinstance(node, JsonObject):
            object_count += 1
            key_count += len(node.members)
            stack.extend((child, depth + 1) for child in node.members.values())
        elif isinstance(node, JsonArray):
            array_count += 1
            stack.extend((child, depth + 1) for child in node.items)

    return StructuralProfile(
        top_level_type=str(value.kind),
        max_depth=max_depth,
        object_count=object_count,
        array_count=array_count,
        primitive_count=primitive_count,
        key_count=key_count,
    )
