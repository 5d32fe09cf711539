"""Tree subpackage for JSON value primitives.

Re-exports the public API for the tree module:
- ValueKind: StrEnum of the six JSON value kinds
- kind_of / is_simple / scalar_key / as_double: closed-kind classification helpers
- describe / render: value renderings used in diff messages
- JsonLiteral / parse_json: the JSON text adapter
"""

from json_equivalence.tree.nodes import (
    JsonValue,
    ValueKind,
    as_double,
    describe,
    is_simple,
    kind_of,
    render,
    scalar_key,
)
from json_equivalence.tree.parser import JsonLiteral, parse_json

__all__ = [
    "JsonLiteral",
    "JsonValue",
    "ValueKind",
    "as_double",
    "describe",
    "is_simple",
    "kind_of",
    "parse_json",
    "render",
    "scalar_key",
]
