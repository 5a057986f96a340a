"""AST visitor for program trees.

Provides a base visitor class with match-based dispatch and a pre-order
node iterator.

Example, collecting declared metric names:

    class DeclCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.names: list[str] = []

        def visit_declaration(self, node: Declaration) -> None:
            self.names.append(node.name)

    collector = DeclCollector()
    collector.visit(program)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. iter_nodes is pure.

"""

from collections.abc import Iterator

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


class BaseVisitor[T]:
    """Base AST visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method.

        Walks children automatically after the visit method returns.

        """
        result = self._dispatch(node)
        for child in child_nodes(node):
            self.visit(child)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method.

        Override this for catch-all behavior. Default returns None
        (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    def visit_statement_list(self, node: StatementList) -> T:
        return self.visit_default(node)

    def visit_expression_list(self, node: ExpressionList) -> T:
        return self.visit_default(node)

    def visit_conditional(self, node: Conditional) -> T:
        return self.visit_default(node)

    def visit_regex(self, node: Regex) -> T:
        return self.visit_default(node)

    def visit_binary_expr(self, node: BinaryExpr) -> T:
        return self.visit_default(node)

    def visit_unary_expr(self, node: UnaryExpr) -> T:
        return self.visit_default(node)

    def visit_string_literal(self, node: StringLiteral) -> T:
        return self.visit_default(node)

    def visit_identifier(self, node: Identifier) -> T:
        return self.visit_default(node)

    def visit_capture_ref(self, node: CaptureRef) -> T:
        return self.visit_default(node)

    def visit_builtin(self, node: Builtin) -> T:
        return self.visit_default(node)

    def visit_indexed_expr(self, node: IndexedExpr) -> T:
        return self.visit_default(node)

    def visit_declaration(self, node: Declaration) -> T:
        return self.visit_default(node)

    def visit_numeric_expr(self, node: NumericExpr) -> T:
        return self.visit_default(node)

    def visit_function_def(self, node: FunctionDef) -> T:
        return self.visit_default(node)

    def visit_decorator(self, node: Decorator) -> T:
        return self.visit_default(node)

    def visit_next(self, node: Next) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case StatementList():
                return self.visit_statement_list(node)
            case ExpressionList():
                return self.visit_expression_list(node)
            case Conditional():
                return self.visit_conditional(node)
            case Regex():
                return self.visit_regex(node)
            case BinaryExpr():
                return self.visit_binary_expr(node)
            case UnaryExpr():
                return self.visit_unary_expr(node)
            case StringLiteral():
                return self.visit_string_literal(node)
            case Identifier():
                return self.visit_identifier(node)
            case CaptureRef():
                return self.visit_capture_ref(node)
            case Builtin():
                return self.visit_builtin(node)
            case IndexedExpr():
                return self.visit_indexed_expr(node)
            case Declaration():
                return self.visit_declaration(node)
            case NumericExpr():
                return self.visit_numeric_expr(node)
            case FunctionDef():
                return self.visit_function_def(node)
            case Decorator():
                return self.visit_decorator(node)
            case Next():
                return self.visit_next(node)
            case _:
                return self.visit_default(node)


def child_nodes(node: Node) -> tuple[Node, ...]:
    """Return the direct children of a node, in source order."""
    match node:
        case StatementList(children=children) | ExpressionList(children=children):
            return children
        case FunctionDef(children=children) | Decorator(children=children):
            return children
        case Conditional(cond=cond, children=children):
            return children if cond is None else (cond, *children)
        case BinaryExpr(lhs=lhs, rhs=rhs):
            return (lhs, rhs)
        case UnaryExpr(operand=operand):
            return (operand,)
        case Builtin(args=args):
            return () if args is None else (args,)
        case IndexedExpr(base=base, index=index):
            return (base, index)
        case _:
            return ()  # Leaf nodes: no children


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield every node in the tree, depth-first, pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(child_nodes(node)))
