"""Operator tokens carried by expression nodes.

The front-end records which operator an expression used as an Operator member.
BINARY_TOKENS maps each binary operator to its canonical spelling, with the
surrounding spaces the unparser emits.

Thread Safety:
Operator is an enum and BINARY_TOKENS is a read-only mapping; both are
inherently safe to share.

"""

from enum import Enum, auto
from types import MappingProxyType


class Operator(Enum):
    """Operators that can appear in BinaryExpr and UnaryExpr nodes.

    Organized by category:
    - Comparison (LT, GT, LE, GE, EQ, NE)
    - Shift and bitwise (SHL, SHR, AND, OR, XOR, NOT)
    - Arithmetic (PLUS, MINUS, MUL, DIV, POW)
    - Assignment (ASSIGN, ADD_ASSIGN)
    - Postfix (INC)

    """

    # Comparison
    LT = auto()  # <
    GT = auto()  # >
    LE = auto()  # <=
    GE = auto()  # >=
    EQ = auto()  # ==
    NE = auto()  # !=

    # Shift and bitwise
    SHL = auto()  # <<
    SHR = auto()  # >>
    AND = auto()  # &
    OR = auto()  # |
    XOR = auto()  # ^
    NOT = auto()  # ~ (unary, also accepted in binary position)

    # Arithmetic
    PLUS = auto()  # +
    MINUS = auto()  # -
    MUL = auto()  # *
    DIV = auto()  # /
    POW = auto()  # **

    # Assignment
    ASSIGN = auto()  # =
    ADD_ASSIGN = auto()  # +=

    # Postfix
    INC = auto()  # ++


BINARY_TOKENS = MappingProxyType(
    {
        Operator.LT: " < ",
        Operator.GT: " > ",
        Operator.LE: " <= ",
        Operator.GE: " >= ",
        Operator.EQ: " == ",
        Operator.NE: " != ",
        Operator.SHL: " << ",
        Operator.SHR: " >> ",
        Operator.AND: " & ",
        Operator.OR: " | ",
        Operator.XOR: " ^ ",
        Operator.NOT: " ~ ",
        Operator.PLUS: " + ",
        Operator.MINUS: " - ",
        Operator.MUL: " * ",
        Operator.DIV: " / ",
        Operator.POW: " ** ",
        Operator.ASSIGN: " = ",
        Operator.ADD_ASSIGN: " += ",
    }
)
