"""Value model: a closed tagged union of immutable JSON nodes.

Every parsed document is represented as a tree of the six dataclasses below.
Each class carries a ``kind`` class attribute (a ``ValueKind``) so traversals
can dispatch on the tag without inspecting Python payload types.

Equality is deep and structural:
- ``JsonBool(True) != JsonNumber(1)`` (distinct classes never compare equal)
- ``JsonNumber(1) == JsonNumber(1.0)``
- arrays compare element-wise in order
- objects compare as mappings, so key order does not affect equality

Container equality walks pairs of nodes with an explicit stack
(``values_equal``), so comparing documents of any depth never recurses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import ClassVar, TypeAlias


class ValueKind(StrEnum):
    """The six JSON value kinds.

    StrEnum values are the lowercased member names and double as the type
    names used by schemas, statistics histograms and structural profiles.
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


@dataclass(frozen=True, slots=True)
class JsonNull:
    """The JSON ``null`` literal."""

    kind: ClassVar[ValueKind] = ValueKind.NULL


@dataclass(frozen=True, slots=True)
class JsonBool:
    """A JSON ``true`` / ``false`` literal."""

    value: bool
    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN


@dataclass(frozen=True, slots=True)
class JsonNumber:
    """A JSON number.  Integers stay ``int`` so large values keep precision."""

    value: int | float
    kind: ClassVar[ValueKind] = ValueKind.NUMBER


@dataclass(frozen=True, slots=True)
class JsonString:
    """A JSON string."""

    value: str
    kind: ClassVar[ValueKind] = ValueKind.STRING


@dataclass(frozen=True, slots=True, eq=False)
class JsonArray:
    """A JSON array.  Owns its elements."""

    items: tuple[Value, ...] = ()
    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonArray):
            return NotImplemented
        return values_equal(self, other)


@dataclass(frozen=True, slots=True, eq=False)
class JsonObject:
    """A JSON object.  Owns its member values; insertion order is preserved.

    The ``members`` dict must not be mutated after construction.  It is a
    plain dict so equality stays order-insensitive.
    """

    members: dict[str, Value] = field(default_factory=dict)
    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return values_equal(self, other)


Value: TypeAlias = JsonNull | JsonBool | JsonNumber | JsonString | JsonArray | JsonObject

PRIMITIVE_KINDS: frozenset[ValueKind] = frozenset(
    {ValueKind.NULL, ValueKind.BOOLEAN, ValueKind.NUMBER, ValueKind.STRING}
)


def values_equal(first: Value, second: Value) -> bool:
    """Deep structural equality of two Value trees, without recursion.

    Each pair popped from the work stack must agree on kind; arrays must agree
    on length, objects on key set, primitives on payload.  Matching children
    are pushed as new pairs.
    """
    pending: list[tuple[Value, Value]] = [(first, second)]
    while pending:
        a, b = pending.pop()
        if a is b:
            continue
        if a.kind is not b.kind:
            return False
        if a.kind in PRIMITIVE_KINDS:
            # dataclass eq on the payload; 1 == 1.0 holds here
            if a != b:
                return False
        elif isinstance(a, JsonArray) and isinstance(b, JsonArray):
            if len(a.items) != len(b.items):
                return False
            pending.extend(zip(a.items, b.items))
        elif isinstance(a, JsonObject) and isinstance(b, JsonObject):
            if a.members.keys() != b.members.keys():
                return False
            pending.extend((member, b.members[key]) for key, member in a.members.items())
    return True


def child_nodes(value: Value) -> tuple[Value, ...]:
    """Direct children of a container in document order; ``()`` for primitives."""
    if isinstance(value, JsonObject):
        return tuple(value.members.values())
    if isinstance(value, JsonArray):
        return value.items
    return ()
