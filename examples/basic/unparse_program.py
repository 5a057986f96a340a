"""Build a small program tree by hand and print it back as source."""

from tailprog import (
    CaptureRef,
    Conditional,
    Declaration,
    Identifier,
    IndexedExpr,
    MetricKind,
    Operator,
    Regex,
    SourceLocation,
    StatementList,
    UnaryExpr,
    unparse,
)

loc = SourceLocation.unknown()
program = StatementList(loc, (
    Declaration(loc, MetricKind.COUNTER, "requests", ("code",)),
    Conditional(loc, Regex(loc, 'HTTP/1.1" (?P<code>\\d+)'), (
        StatementList(loc, (
            UnaryExpr(loc, Operator.INC, IndexedExpr(loc, Identifier(loc, "requests"), CaptureRef(loc, "code"))),
        )),
    )),
))
print(unparse(program), end="")
