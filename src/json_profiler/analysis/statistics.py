"""Statistics collector: key, type and length distributions.

A single pre-order pass over the tree.  Children are pushed onto the work
stack in reverse so they are visited in document order, which keeps
``array_lengths`` and ``string_lengths`` in the same order a recursive walk
would produce.

Key uniqueness is about key *names*: a key called ``id`` appearing at three
nesting levels counts three times toward ``total_keys`` and once toward
``unique_keys``.
"""

from __future__ import annotations

import numpy as np

from json_profiler.result import LengthSummary, Statistics
from json_profiler.tree.nodes import JsonArray, JsonNull, JsonObject, JsonString, Value

__all__ = ["collect_statistics", "summarize_lengths"]


def summarize_lengths(lengths: list[int]) -> LengthSummary:
    """Summarize a length distribution (count, min, max, mean, median)."""
    if not lengths:
        return LengthSummary(count=0)

    values = np.asarray(lengths, dtype=np.int64)
    return LengthSummary(
        count=int(values.size),
        min=int(values.min()),
        max=int(values.max()),
        mean=float(np.mean(values)),
        median=float(np.median(values)),
    )


def collect_statistics(value: Value) -> Statistics:
    """Collect key cardinality, null/empty counts and distributions.

    Args:
        value: Root of the document.

    Returns:
        A ``Statistics`` record.  Containers count themselves in the type
        histogram in addition to being traversed.
    """
    total_keys = 0
    key_names: set[str] = set()
    null_values = 0
    empty_strings = 0
    type_histogram: dict[str, int] = {}
    array_lengths: list[int] = []
    string_lengths: list[int] = []

    stack: list[Value] = [value]
    while stack:
        node = stack.pop()
        kind = str(node.kind)
        type_histogram[kind] = type_histogram.get(kind, 0) + 1

        if isinstance(node, JsonObject):
            total_keys += len(node.members)
            key_names.update(node.members)
            stack.extend(reversed(node.members.values()))
        elif isinstance(node, JsonArray):
            array_lengths.append(len(node.items))
            stack.extend(reversed(node.items))
        elif isinstance(node, JsonString):
            string_lengths.append(len(node.value))
            if node.value == "":
                empty_strings += 1
        elif isinstance(node, JsonNull):
            null_values += 1

    return Statistics(
        total_keys=total_keys,
        unique_keys=len(key_names),
        null_values=null_values,
        empty_strings=empty_strings,
        type_histogram=type_histogram,
        array_lengths=array_lengths,
        string_lengths=string_lengths,
        array_length_summary=summarize_lengths(array_lengths),
        string_length_summary=summarize_lengths(string_lengths),
    )
