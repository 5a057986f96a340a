"""AST serialization: JSON interchange for program trees.

Converts typed AST nodes to/from JSON-compatible dicts. Useful for:
- Dumping a tree from the front-end for later inspection
- Feeding trees to ``python -m tailprog``
- Comparing trees in tests

All output is deterministic (sorted keys).

Example:
    from tailprog.serialization import to_json, from_json

    text = to_json(program)
    restored = from_json(text)
    assert program == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from enum import Enum
from typing import Any

from tailprog.config import get_config
from tailprog.location import SourceLocation
from tailprog.metrics import MetricKind
from tailprog.nodes import (
    BinaryExpr,
    Builtin,
    CaptureRef,
    Conditional,
    Declaration,
    Decorator,
    ExpressionList,
    FunctionDef,
    Identifier,
    IndexedExpr,
    Next,
    Node,
    NumericExpr,
    Regex,
    StatementList,
    StringLiteral,
    UnaryExpr,
)
from tailprog.tokens import Operator

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    "StatementList": StatementList,
    "ExpressionList": ExpressionList,
    "Conditional": Conditional,
    "Regex": Regex,
    "BinaryExpr": BinaryExpr,
    "UnaryExpr": UnaryExpr,
    "StringLiteral": StringLiteral,
    "Identifier": Identifier,
    "CaptureRef": CaptureRef,
    "Builtin": Builtin,
    "IndexedExpr": IndexedExpr,
    "Declaration": Declaration,
    "NumericExpr": NumericExpr,
    "FunctionDef": FunctionDef,
    "Decorator": Decorator,
    "Next": Next,
}

# Fields holding enum members, stored by member name
_ENUM_FIELDS: dict[str, type[Enum]] = {
    "op": Operator,
    "kind": MetricKind,
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes, enum members and SourceLocation.

    Args:
        node: Any tailprog AST node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "line": value.line,
            "start_col": value.start_col,
            "end_col": value.end_col,
            "filename": value.filename,
        }
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed AST node from a dict.

    Uses the ``_type`` discriminator to determine the node class.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed AST node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown, an enum member name is
            unknown, or nesting is deeper than the configured ``max_depth``.

    """
    return _node_from_dict(data, 0, get_config().max_depth)


def _node_from_dict(data: dict[str, Any], depth: int, max_depth: int) -> Node:
    if depth > max_depth:
        msg = f"Tree nesting exceeds max_depth={max_depth}"
        raise ValueError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)
    if not isinstance(type_name, str):
        msg = f"Invalid '_type' field: {type_name!r}"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name in _ENUM_FIELDS:
            kwargs[f.name] = _enum_member(_ENUM_FIELDS[f.name], raw)
        else:
            kwargs[f.name] = _deserialize_value(raw, depth, max_depth)

    try:
        return node_cls(**kwargs)
    except TypeError as e:
        msg = f"Cannot build {type_name}: {e}"
        raise ValueError(msg) from e


def _enum_member(enum_cls: type[Enum], name: Any) -> Enum:
    try:
        return enum_cls[name]
    except (KeyError, TypeError):
        msg = f"Unknown {enum_cls.__name__} member: {name!r}"
        raise ValueError(msg) from None


def _deserialize_value(value: Any, depth: int, max_depth: int) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        type_name = value.get("_type")
        if type_name == "SourceLocation":
            line = value.get("line")
            if not isinstance(line, int) or isinstance(line, bool):
                msg = f"SourceLocation requires an integer 'line', got {line!r}"
                raise ValueError(msg)
            return SourceLocation(
                line=line,
                start_col=value.get("start_col", 0),
                end_col=value.get("end_col", 0),
                filename=value.get("filename"),
            )
        if type_name is not None:
            return _node_from_dict(value, depth + 1, max_depth)
        return value
    if isinstance(value, list):
        return tuple(_deserialize_value(item, depth, max_depth) for item in value)
    return value


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize an AST to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        node: Root of the tree to serialize.
        indent: JSON indentation level (defaults to the configured json_indent).

    Returns:
        JSON string.

    """
    if indent is None:
        indent = get_config().json_indent
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str) -> Node:
    """Deserialize an AST from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Root node.

    Raises:
        ValueError: If the JSON is invalid or does not describe a node.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a serialized node, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_dict(raw)
