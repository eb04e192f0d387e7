"""Schema inferencer: a normalized, type-only description of a Value.

Shape of the output::

    {"type": "null" | "boolean" | "number" | "string"}
    {"type": "array",  "items": <Schema> | [<Schema>, ...]}
    {"type": "object", "properties": {key: <Schema>, ...}}

Array element schemas are unioned: element schemas are de-duplicated by
structural equality in first-seen order.  A single distinct schema collapses
to ``items: <Schema>``; several stay an ordered sequence; an empty array
yields an empty sequence.

Structural equality of schemas ignores property order.  During inference
every schema receives a canonical id, computed once from its children's ids
(property ids as an unordered set), so structurally equal schemas share an
id and de-duplication never re-walks a subtree.  ``Schema.fingerprint()``
gives the same equivalence as text (sorted-key compact JSON).

Inference and ``to_dict()`` both use explicit work stacks, so schema depth is
not limited by the interpreter's recursion limit.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Hashable

from json_profiler.tree.nodes import JsonArray, JsonObject, Value, ValueKind, child_nodes

__all__ = ["Schema", "infer_schema"]


@dataclass(frozen=True, slots=True)
class Schema:
    """An inferred schema node.

    Attributes:
        type: The JSON kind this schema describes.
        items: For arrays only: one Schema, or a tuple of distinct Schemas.
        properties: For objects only: key -> Schema in document order.
    """

    type: ValueKind
    items: Schema | tuple[Schema, ...] | None = None
    properties: dict[str, Schema] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the schema as plain JSON-serializable data."""
        stack: list[tuple[Schema, dict[str, Any]]] = []
        root = _open_record(stack, self)
        while stack:
            schema, record = stack.pop()
            record["type"] = str(schema.type)
            if schema.type == ValueKind.ARRAY:
                if isinstance(schema.items, Schema):
                    record["items"] = _open_record(stack, schema.items)
                else:
                    record["items"] = [
                        _open_record(stack, item) for item in schema.items or ()
                    ]
            elif schema.type == ValueKind.OBJECT:
                record["properties"] = {
                    key: _open_record(stack, prop)
                    for key, prop in (schema.properties or {}).items()
                }
        return root

    def fingerprint(self) -> str:
        """Canonical text form; equal for structurally equal schemas."""
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))


_PRIMITIVE_SCHEMAS: dict[ValueKind, Schema] = {
    kind: Schema(type=kind)
    for kind in (ValueKind.NULL, ValueKind.BOOLEAN, ValueKind.NUMBER, ValueKind.STRING)
}


def _open_record(
    stack: list[tuple[Schema, dict[str, Any]]], schema: Schema
) -> dict[str, Any]:
    # An empty record, filled in when its schema is popped.
    record: dict[str, Any] = {}
    stack.append((schema, record))
    return record


def infer_schema(value: Value) -> Schema:
    """Infer the schema of a Value tree.

    Deterministic: repeated calls, and calls on a re-parsed copy of the same
    text, produce equal schemas whose ``to_dict()`` serializes identically.

    Example::

        infer_schema(parse('{"a": 1, "b": [1, 2]}')).to_dict()
        # {"type": "object", "properties": {"a": {"type": "number"},
        #  "b": {"type": "array", "items": {"type": "number"}}}}
    """
    return _SchemaInference().run(value)


class _SchemaInference:
    """One bottom-up inference pass over a single Value tree."""

    def __init__(self) -> None:
        # id(value node) -> its schema; keeps every schema alive for the pass
        self._schemas: dict[int, Schema] = {}
        # id(schema) -> canonical id shared by structurally equal schemas
        self._ids: dict[int, int] = {}
        self._canonical: dict[Hashable, int] = {}

    def run(self, root: Value) -> Schema:
        stack: list[tuple[Value, bool]] = [(root, False)]
        while stack:
            node, expanded = stack.pop()
            children = child_nodes(node)
            if children and not expanded:
                stack.append((node, True))
                stack.extend((child, False) for child in children)
                continue
            schema = self._infer_node(node)
            self._register(schema)
            self._schemas[id(node)] = schema
        return self._schemas[id(root)]

    def _infer_node(self, node: Value) -> Schema:
        if isinstance(node, JsonObject):
            return Schema(
                type=ValueKind.OBJECT,
                properties={
                    key: self._schemas[id(member)] for key, member in node.members.items()
                },
            )
        if isinstance(node, JsonArray):
            distinct: dict[int, Schema] = {}
            for item in node.items:
                schema = self._schemas[id(item)]
                distinct.setdefault(self._ids[id(schema)], schema)
            schemas = tuple(distinct.values())
            if len(schemas) == 1:
                return Schema(type=ValueKind.ARRAY, items=schemas[0])
            return Schema(type=ValueKind.ARRAY, items=schemas)
        return _PRIMITIVE_SCHEMAS[node.kind]

    def _register(self, schema: Schema) -> None:
        if id(schema) in self._ids:
            # primitive schemas are shared
            return
        key: Hashable
        if schema.type == ValueKind.ARRAY:
            items = (schema.items,) if isinstance(schema.items, Schema) else schema.items or ()
            key = (schema.type, tuple(self._ids[id(item)] for item in items))
        elif schema.type == ValueKind.OBJECT:
            key = (
                schema.type,
                frozenset(
                    (name, self._ids[id(prop)])
                    for name, prop in (schema.properties or {}).items()
                ),
            )
        else:
            key = (schema.type,)
        self._ids[id(schema)] = self._canonical.setdefault(key, len(self._canonical))
