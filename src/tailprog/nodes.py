"""Typed AST nodes for log-processing programs.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: the unparser and visitors only ever read the tree
- Pattern matching: match statements dispatch on the node class

Node Hierarchy:
Node (base)
├── StatementList    one statement per line
├── ExpressionList   comma separated arguments
├── Conditional      guarded block: cond { ... }
├── Regex            /pattern/
├── BinaryExpr       lhs <op> rhs
├── UnaryExpr        x++ or ~x
├── StringLiteral    "text"
├── Identifier       name
├── CaptureRef       $name
├── Builtin          name(args)
├── IndexedExpr      base[index]
├── Declaration      counter name by key, ...
├── NumericExpr      42
├── FunctionDef      def name { ... }
├── Decorator        @name { ... }
└── Next             next

Trees are built by the front-end (lexer and parser). This package never
constructs them from program text.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from tailprog.location import SourceLocation
from tailprog.metrics import MetricKind
from tailprog.tokens import Operator

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track their source location for error messages and debugging.

    """

    location: SourceLocation


# =============================================================================
# Lists
# =============================================================================


@dataclass(frozen=True, slots=True)
class StatementList(Node):
    """Sequence of statements, each on its own line.

    The root of a parsed program is a StatementList.

    """

    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class ExpressionList(Node):
    """Comma separated expressions, as in builtin call arguments."""

    children: tuple[Node, ...]


# =============================================================================
# Blocks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Conditional(Node):
    """Guarded block.

    Source: /pattern/ { ... } or x > 0 { ... }

    The guard is optional; a bare block has cond=None.

    """

    cond: Node | None
    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class FunctionDef(Node):
    """Decorator definition.

    Source: def name { ... }

    """

    name: str
    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Decorator(Node):
    """Block wrapped by a previously defined decorator.

    Source: @name { ... }

    """

    name: str
    children: tuple[Node, ...]


# =============================================================================
# Expressions
# =============================================================================


@dataclass(frozen=True, slots=True)
class Regex(Node):
    """Regular expression literal.

    Source: /GET (?P<path>\\S+)/

    The pattern is stored unescaped; a literal slash is just "/".

    """

    pattern: str


@dataclass(frozen=True, slots=True)
class BinaryExpr(Node):
    """Binary operation, including assignment."""

    lhs: Node
    op: Operator
    rhs: Node


@dataclass(frozen=True, slots=True)
class UnaryExpr(Node):
    """Unary operation: postfix increment or bitwise not."""

    op: Operator
    operand: Node


@dataclass(frozen=True, slots=True)
class StringLiteral(Node):
    """String constant. The text is stored without surrounding quotes."""

    text: str


@dataclass(frozen=True, slots=True)
class Identifier(Node):
    """Reference to a variable or metric by name."""

    name: str


@dataclass(frozen=True, slots=True)
class CaptureRef(Node):
    """Reference to a named or numbered regex capture group.

    Source: $name or $1

    """

    name: str


@dataclass(frozen=True, slots=True)
class Builtin(Node):
    """Builtin function call.

    Source: strptime($date, "%Y-%m-%d")

    """

    name: str
    args: ExpressionList | None = None


@dataclass(frozen=True, slots=True)
class IndexedExpr(Node):
    """Subscript of a dimensioned metric.

    Source: requests[$code]

    """

    base: Node
    index: Node


@dataclass(frozen=True, slots=True)
class NumericExpr(Node):
    """Integer constant."""

    value: int


# =============================================================================
# Statements
# =============================================================================


@dataclass(frozen=True, slots=True)
class Declaration(Node):
    """Metric declaration.

    Source: counter requests by code, method

    """

    kind: MetricKind
    name: str
    keys: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Next(Node):
    """The next keyword, marking where a decorated block is spliced in."""


# PEP 695 type alias for every node the unparser accepts
type AnyNode = (
    StatementList
    | ExpressionList
    | Conditional
    | Regex
    | BinaryExpr
    | UnaryExpr
    | StringLiteral
    | Identifier
    | CaptureRef
    | Builtin
    | IndexedExpr
    | Declaration
    | NumericExpr
    | FunctionDef
    | Decorator
    | Next
)
