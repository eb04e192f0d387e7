"""Path enumerator and path-addressed lookup.

Path syntax (dot/bracket notation)::

    object property  -> parent + "." + key     (just key when parent is "")
    array element    -> parent + "[" + index + "]"
    root             -> never emitted

e.g. ``a.b[2].c``.  Object keys are used verbatim, so a key containing ``.``
or ``[`` produces a path that is ambiguous when split purely syntactically.
``resolve_path`` therefore resolves tree-guided: at each object it tries the
keys that prefix the remaining path, in insertion order, and backtracks on a
dead end.  Every path produced by ``enumerate_paths(v)`` resolves in ``v``.
"""

from __future__ import annotations

import re
from typing import Iterator

from json_profiler.errors import PathNotFoundError
from json_profiler.tree.nodes import JsonArray, JsonObject, Value

__all__ = [
    "enumerate_paths",
    "find_path",
    "format_path",
    "join_index",
    "join_key",
    "parse_path",
    "resolve_path",
    "resume_path",
]

# Key runs and canonical (no leading zero) bracket indices.
_SEGMENT_RE = re.compile(r"([^.\[\]]+)|\[(0|[1-9]\d*)\]")
_INDEX_RE = re.compile(r"\[(0|[1-9]\d*)\]")


def join_key(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


def join_index(parent: str, index: int) -> str:
    return f"{parent}[{index}]"


def enumerate_paths(value: Value) -> Iterator[str]:
    """Yield every addressable path of ``value``, depth-first.

    The generator is lazy and finite; call again to restart.  Object members
    are visited in insertion order, array elements by index.
    """
    stack: list[tuple[Value, str]] = [(value, "")]
    while stack:
        node, path = stack.pop()
        if path:
            yield path

        if isinstance(node, JsonObject):
            stack.extend(
                (child, join_key(path, key))
                for key, child in reversed(node.members.items())
            )
        elif isinstance(node, JsonArray):
            stack.extend(
                (node.items[index], join_index(path, index))
                for index in range(len(node.items) - 1, -1, -1)
            )


def parse_path(path: str) -> list[str | int]:
    """Split a path into key (str) and index (int) segments syntactically.

    Keys containing ``.``, ``[`` or ``]`` cannot be recovered this way; use
    ``resolve_path`` to look a path up in a concrete tree.
    """
    segments: list[str | int] = []
    for match in _SEGMENT_RE.finditer(path):
        key, index = match.group(1), match.group(2)
        if key is not None:
            segments.append(key)
        else:
            segments.append(int(index))
    return segments


def format_path(segments: list[str | int]) -> str:
    """Inverse of ``parse_path`` for unambiguous segment lists."""
    path = ""
    for segment in segments:
        if isinstance(segment, int):
            path = join_index(path, segment)
        else:
            path = join_key(path, segment)
    return path


def find_path(value: Value, path: str) -> Value | None:
    """Return the node addressed by ``path``, or None when it does not resolve.

    ``""`` addresses the root.
    """
    segments = parse_path(path)
    if format_path(segments) == path:
        found = _walk_segments(value, segments)
        if found is not None:
            return found
    return resume_path(value, path, at_root=True)


def resolve_path(value: Value, path: str) -> Value:
    """Return the node addressed by ``path``.

    Raises:
        PathNotFoundError: The path does not address a node of ``value``.
    """
    found = find_path(value, path)
    if found is None:
        raise PathNotFoundError(path)
    return found


def _walk_segments(value: Value, segments: list[str | int]) -> Value | None:
    node = value
    for segment in segments:
        if isinstance(segment, int):
            if not isinstance(node, JsonArray) or segment >= len(node.items):
                return None
            node = node.items[segment]
        else:
            if not isinstance(node, JsonObject) or segment not in node.members:
                return None
            node = node.members[segment]
    return node


def resume_path(value: Value, rest: str, at_root: bool = False) -> Value | None:
    """Tree-guided resolution with backtracking over ambiguous keys.

    ``at_root`` is True while the path consumed so far is empty, in which case
    the next object key is not preceded by a ``.``.
    """
    stack: list[tuple[Value, str, bool]] = [(value, rest, at_root)]
    while stack:
        node, rest, at_root = stack.pop()
        if not rest:
            return node

        if isinstance(node, JsonArray):
            match = _INDEX_RE.match(rest)
            if match is not None:
                index = int(match.group(1))
                if index < len(node.items):
                    stack.append((node.items[index], rest[match.end():], False))
            continue

        if not isinstance(node, JsonObject):
            continue

        if at_root:
            body = rest
        elif rest.startswith("."):
            body = rest[1:]
        else:
            continue

        candidates: list[tuple[Value, str, bool]] = []
        for key, child in node.members.items():
            if at_root and key == "":
                # An empty key under an empty path leaves the path empty.
                candidates.append((child, body, True))
                continue
            if not body.startswith(key):
                continue
            tail = body[len(key):]
            if tail and tail[0] not in ".[":
                continue
            candidates.append((child, tail, False))
        stack.extend(reversed(candidates))

    return None
