"""Tree subpackage: the Value model and JSON text conversion.

Re-exports the public API for the tree module:
- Value and its six node classes (JsonNull ... JsonObject)
- ValueKind: StrEnum of the six JSON kinds
- values_equal: deep structural equality without recursion
- ValueBuilder: converts decoded Python JSON into a Value tree
- parse / to_python / dumps: text and plain-data conversions
"""

from json_profiler.tree.builder import ValueBuilder, dumps, parse, to_python
from json_profiler.tree.nodes import (
    PRIMITIVE_KINDS,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    Value,
    ValueKind,
    child_nodes,
    values_equal,
)

__all__ = [
    "PRIMITIVE_KINDS",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "Value",
    "ValueBuilder",
    "ValueKind",
    "child_nodes",
    "dumps",
    "parse",
    "to_python",
    "values_equal",
]
