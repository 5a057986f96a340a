"""
tailprog: program tree unparser for a log-processing language

Renders the syntax tree produced by the language front-end back into canonical
program text, for debugging and introspection of what was parsed.
Zero runtime dependencies.

Quick Start:
    >>> from tailprog import (
    ...     Conditional, Declaration, MetricKind, Regex, SourceLocation,
    ...     StatementList, unparse,
    ... )
    >>> loc = SourceLocation.unknown()
    >>> program = StatementList(loc, (
    ...     Conditional(loc, Regex(loc, "foo"), (Declaration(loc, MetricKind.COUNTER, "bar"),)),
    ... ))
    >>> print(unparse(program), end="")
    /foo/ {
      counter bar
    }

Command line:
    python -m tailprog tree.json
"""

from tailprog.config import (
    TailprogConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from tailprog.errors import RenderError, TailprogError
from tailprog.location import SourceLocation
from tailprog.metrics import MetricKind
from tailprog.nodes import (
    AnyNode,
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
from tailprog.renderers import ASTRenderer, Unparser, unparse
from tailprog.serialization import from_dict, from_json, to_dict, to_json
from tailprog.tokens import BINARY_TOKENS, Operator
from tailprog.visitor import BaseVisitor, child_nodes, iter_nodes

__version__ = "0.1.0"

__all__ = [
    "BINARY_TOKENS",
    "ASTRenderer",
    "AnyNode",
    "BaseVisitor",
    "BinaryExpr",
    "Builtin",
    "CaptureRef",
    "Conditional",
    "Declaration",
    "Decorator",
    "ExpressionList",
    "FunctionDef",
    "Identifier",
    "IndexedExpr",
    "MetricKind",
    "Next",
    "Node",
    "NumericExpr",
    "Operator",
    "Regex",
    "RenderError",
    "SourceLocation",
    "StatementList",
    "StringLiteral",
    "TailprogConfig",
    "TailprogError",
    "UnaryExpr",
    "Unparser",
    "child_nodes",
    "config_context",
    "from_dict",
    "from_json",
    "get_config",
    "iter_nodes",
    "reset_config",
    "set_config",
    "to_dict",
    "to_json",
    "unparse",
]
