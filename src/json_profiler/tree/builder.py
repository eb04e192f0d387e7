"""ValueBuilder: converts decoded JSON into the immutable Value model.

Parsing is delegated to the standard ``json`` decoder in strict mode; the
decoded Python structure is then converted by ``ValueBuilder`` using an
explicit work stack, so arbitrarily deep input never recurses through the
interpreter stack.  Depth and node-count bounds from ``AnalyzerConfig`` are
enforced during conversion.

Dispatch order matters: bool MUST be checked before int because bool is a
subclass of int in Python (isinstance(True, int) is True).
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Iterator

from json_profiler.config import AnalyzerConfig
from json_profiler.errors import ParseError, ResourceLimitError
from json_profiler.tree.nodes import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    Value,
)

__all__ = ["ValueBuilder", "dumps", "parse", "to_python"]

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    # json.loads accepts NaN/Infinity by default; RFC 8259 does not.
    raise ParseError(f"Non-standard constant {name!r} is not allowed")


@dataclass(slots=True)
class _Frame:
    """An open container on the builder's work stack."""

    entries: Iterator[tuple[str | None, Any]]
    depth: int
    is_object: bool
    current_key: str | None = None
    members: dict[str, Value] = field(default_factory=dict)
    items: list[Value] = field(default_factory=list)

    def attach(self, value: Value) -> None:
        if self.is_object:
            # current_key is always set for object frames before a child is built
            self.members[self.current_key] = value  # type: ignore[index]
        else:
            self.items.append(value)

    def close(self) -> Value:
        if self.is_object:
            return JsonObject(self.members)
        return JsonArray(tuple(self.items))


class ValueBuilder:
    """Converts any decoded JSON value into a ``Value`` tree.

    Example::

        builder = ValueBuilder()
        tree = builder.build({"user": {"tags": ["a", "b"]}})
        # JsonObject({"user": JsonObject({"tags": JsonArray((JsonString("a"), ...))})})

    Raises:
        TypeError: For Python values that have no JSON representation.
        ValueError: For non-finite floats.
        ResourceLimitError: When ``max_depth`` or ``max_nodes`` is exceeded.
    """

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        self._config = config if config is not None else AnalyzerConfig()
        self._node_count = 0

    def build(self, obj: Any) -> Value:
        """Convert ``obj`` (dict, list, str, int, float, bool, None) to a Value."""
        self._node_count = 0
        stack: list[_Frame] = []

        root = self._start(obj, 0, stack)
        if root is not None:
            return root

        while stack:
            frame = stack[-1]
            entry = next(frame.entries, None)
            if entry is None:
                stack.pop()
                finished = frame.close()
                if not stack:
                    return finished
                stack[-1].attach(finished)
                continue

            key, child = entry
            frame.current_key = key
            value = self._start(child, frame.depth + 1, stack)
            if value is not None:
                frame.attach(value)

        # Unreachable: the root frame always returns when popped.
        raise AssertionError("work stack drained without producing a root")

    def _start(self, obj: Any, depth: int, stack: list[_Frame]) -> Value | None:
        """Build a leaf directly, or push a frame for a container and return None."""
        self._node_count += 1
        if self._node_count > self._config.max_nodes:
            msg = f"document exceeds max_nodes={self._config.max_nodes}"
            raise ResourceLimitError(msg)
        if depth > self._config.max_depth:
            msg = f"document exceeds max_depth={self._config.max_depth}"
            raise ResourceLimitError(msg)

        # CRITICAL: bool MUST be checked before int
        if isinstance(obj, bool):
            return JsonBool(obj)

        if isinstance(obj, dict):
            for key in obj:
                if not isinstance(key, str):
                    raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
            stack.append(_Frame(iter(obj.items()), depth, is_object=True))
            return None

        if isinstance(obj, list):
            stack.append(
                _Frame(((None, item) for item in obj), depth, is_object=False)
            )
            return None

        if isinstance(obj, str):
            return JsonString(obj)

        if isinstance(obj, (int, float)):
            if isinstance(obj, float) and not math.isfinite(obj):
                raise ValueError(f"Non-finite number {obj!r} has no JSON representation")
            return JsonNumber(obj)

        if obj is None:
            return JsonNull()

        raise TypeError(f"Unsupported JSON value type: {type(obj)!r}")


def parse(text: str, config: AnalyzerConfig | None = None) -> Value:
    """Strictly parse raw JSON text into a Value tree.

    Args:
        text:   Raw JSON text.
        config: Resource bounds.  Defaults to ``AnalyzerConfig()``.

    Returns:
        The root Value of the document.

    Raises:
        ParseError: The text is not valid RFC 8259 JSON.
        ResourceLimitError: The document is nested too deeply or is too large.
    """
    try:
        decoded = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(exc.msg, exc.pos, exc.lineno, exc.colno) from exc
    except RecursionError as exc:
        msg = "document nesting exceeds the decoder's recursion limit"
        raise ResourceLimitError(msg) from exc

    value = ValueBuilder(config).build(decoded)
    logger.debug("parsed %d characters into a %s root", len(text), value.kind)
    return value


def to_python(value: Value) -> Any:
    """Convert a Value tree back into plain dict/list/scalar data.

    Containers are created when first popped and filled as their children
    are popped, so nesting depth never reaches the interpreter stack.
    """
    holder: list[Any] = [None]
    stack: list[tuple[Value, Any, int | str]] = [(value, holder, 0)]
    while stack:
        node, parent, slot = stack.pop()
        converted: Any
        if isinstance(node, JsonObject):
            converted = {}
            # reversed push keeps member insertion order on pop
            stack.extend(
                (member, converted, key) for key, member in reversed(node.members.items())
            )
        elif isinstance(node, JsonArray):
            converted = [None] * len(node.items)
            stack.extend((item, converted, index) for index, item in enumerate(node.items))
        elif isinstance(node, JsonNull):
            converted = None
        elif isinstance(node, (JsonBool, JsonNumber, JsonString)):
            converted = node.value
        else:
            raise TypeError(f"Unsupported Value node: {type(node)!r}")
        parent[slot] = converted
    return holder[0]


def dumps(value: Value) -> str:
    """Serialize a Value tree to compact JSON text."""
    return json.dumps(
        to_python(value), ensure_ascii=False, allow_nan=False, separators=(",", ":")
    )
