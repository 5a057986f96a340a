"""Unparser: converts program syntax trees back to program text.

Used to inspect what the front-end actually parsed. Output is canonical:
two-space indentation, single spaces around binary operators, double-quoted
strings and slash-delimited regexes. No attempt is made to reproduce the
original formatting, and re-parsing the output is not guaranteed to give an
identical tree.

Example:
    >>> from tailprog import unparse
    >>> from tailprog.location import SourceLocation
    >>> from tailprog.nodes import BinaryExpr, Identifier, NumericExpr
    >>> from tailprog.tokens import Operator
    >>> loc = SourceLocation.unknown()
    >>> unparse(BinaryExpr(loc, Identifier(loc, "a"), Operator.PLUS, NumericExpr(loc, 3)))
    'a + 3'

Thread Safety:
Each render() call builds its own IndentedWriter.
Safe for concurrent use from multiple threads.

"""

from tailprog.errors import RenderError
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
from tailprog.tokens import BINARY_TOKENS, Operator
from tailprog.utils.logger import get_logger
from tailprog.writer import IndentedWriter

logger = get_logger(__name__)


class Unparser:
    """Render a syntax tree back to program text.

    Stateless between calls: all buffers live in the IndentedWriter created
    by render(), so one instance can be reused and shared.

    """

    __slots__ = ()

    def render(self, node: Node) -> str:
        """Render a tree to program text.

        The last line is returned as it stands: if the root leaves text on an
        unterminated line (any expression root does), that text is appended
        without a newline. A StatementList root always ends on a line break.

        Rendering recurses once per nesting level, so a tree nested deeper
        than the interpreter's recursion limit cannot be rendered.

        Raises:
            RenderError: If the tree contains a value that is not a node, or
                is nested too deeply to render.
        """
        logger.debug("Unparsing %s", type(node).__name__)
        w = IndentedWriter()
        try:
            self._unparse(node, w)
        except RecursionError as e:
            logger.debug("Tree under %s exceeds the recursion limit", type(node).__name__)
            raise RenderError(
                type(node).__name__,
                getattr(node, "location", None),
                "tree nested too deeply to unparse",
            ) from e
        return w.getvalue() + w.pending

    def _unparse(self, node: Node, w: IndentedWriter) -> None:
        """Dispatch on the node class and emit its text."""
        match node:
            case StatementList():
                for child in node.children:
                    self._unparse(child, w)
                    w.newline()
            case ExpressionList():
                for i, child in enumerate(node.children):
                    if i:
                        w.emit(", ")
                    self._unparse(child, w)
            case Conditional():
                if node.cond is not None:
                    self._unparse(node.cond, w)
                w.emit(" {")
                self._render_block(node.children, w)
            case Regex():
                w.emit("/" + node.pattern.replace("/", "\\/") + "/")
            case BinaryExpr():
                self._unparse(node.lhs, w)
                # INC has no binary spelling; unknown operators emit nothing
                w.emit(BINARY_TOKENS.get(node.op, ""))
                self._unparse(node.rhs, w)
            case UnaryExpr():
                self._render_unary(node, w)
            case StringLiteral():
                # Embedded quotes and backslashes are written as-is.
                w.emit('"' + node.text + '"')
            case Identifier():
                w.emit(node.name)
            case CaptureRef():
                w.emit("$" + node.name)
            case Builtin():
                w.emit(node.name + "(")
                if node.args is not None:
                    self._unparse(node.args, w)
                w.emit(")")
            case IndexedExpr():
                self._unparse(node.base, w)
                w.emit("[")
                self._unparse(node.index, w)
                w.emit("]")
            case Declaration():
                self._render_declaration(node, w)
            case NumericExpr():
                w.emit(str(node.value))
            case FunctionDef():
                w.emit(f"def {node.name} {{")
                self._render_block(node.children, w)
            case Decorator():
                w.emit(f"@{node.name} {{")
                self._render_block(node.children, w)
            case Next():
                w.emit("next")
            case _:
                location = getattr(node, "location", None)
                logger.debug("Malformed tree: %r", node)
                raise RenderError(type(node).__name__, location)

    def _render_block(self, children: tuple[Node, ...], w: IndentedWriter) -> None:
        """Render a brace-delimited body after its opening line.

        Each child ends on a line break. Children that terminate their own
        lines (statement lists) are not followed by an extra blank line.
        The closing brace is left on the pending line for the caller.
        """
        w.newline()
        w.indent()
        for child in children:
            self._unparse(child, w)
            if w.pending:
                w.newline()
        w.outdent()
        w.emit("}")

    def _render_unary(self, node: UnaryExpr, w: IndentedWriter) -> None:
        match node.op:
            case Operator.INC:
                self._unparse(node.operand, w)
                w.emit("++")
            case Operator.NOT:
                w.emit(" ~")
                self._unparse(node.operand, w)
            case _:
                pass

    def _render_declaration(self, node: Declaration, w: IndentedWriter) -> None:
        # Kinds outside the known set get no keyword; name and keys still render.
        if isinstance(node.kind, MetricKind):
            w.emit(node.kind.value + " ")
        w.emit(node.name)
        if node.keys:
            w.emit(" by " + ", ".join(node.keys))


def unparse(node: Node) -> str:
    """Render a syntax tree to program text.

    Args:
        node: Root of the tree, usually a StatementList.

    Returns:
        Program text.
    """
    return Unparser().render(node)
