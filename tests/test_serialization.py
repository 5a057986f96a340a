"""Tests for tailprog.serialization: AST JSON interchange."""

import json

import pytest

from tailprog.config import TailprogConfig, config_context
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
    NumericExpr,
    Regex,
    StatementList,
    StringLiteral,
    UnaryExpr,
)
from tailprog.renderers.unparser import unparse
from tailprog.serialization import from_dict, from_json, to_dict, to_json
from tailprog.tokens import Operator

_LOC = SourceLocation(line=3, start_col=1, end_col=5, filename="apache.mtail")


def _program() -> StatementList:
    return StatementList(
        location=_LOC,
        children=(
            Declaration(location=_LOC, kind=MetricKind.COUNTER, name="requests", keys=("code",)),
            FunctionDef(location=_LOC, name="d", children=(StatementList(location=_LOC, children=(Next(location=_LOC),)),)),
            Decorator(location=_LOC, name="d", children=()),
            Conditional(
                location=_LOC,
                cond=Regex(location=_LOC, pattern="(?P<code>\\d+)"),
                children=(
                    StatementList(
                        location=_LOC,
                        children=(
                            UnaryExpr(
                                location=_LOC,
                                op=Operator.INC,
                                operand=IndexedExpr(
                                    location=_LOC,
                                    base=Identifier(location=_LOC, name="requests"),
                                    index=CaptureRef(location=_LOC, name="code"),
                                ),
                            ),
                            BinaryExpr(
                                location=_LOC,
                                lhs=Identifier(location=_LOC, name="t"),
                                op=Operator.ASSIGN,
                                rhs=Builtin(
                                    location=_LOC,
                                    name="strptime",
                                    args=ExpressionList(
                                        location=_LOC,
                                        children=(
                                            CaptureRef(location=_LOC, name="date"),
                                            StringLiteral(location=_LOC, text="%Y"),
                                        ),
                                    ),
                                ),
                            ),
                            NumericExpr(location=_LOC, value=7),
                        ),
                    ),
                ),
            ),
            Conditional(location=_LOC, cond=None, children=()),
            Builtin(location=_LOC, name="timestamp"),
        ),
    )


class TestToDict:
    def test_type_discriminator(self) -> None:
        data = to_dict(Identifier(location=_LOC, name="x"))
        assert data["_type"] == "Identifier"
        assert data["name"] == "x"

    def test_location(self) -> None:
        data = to_dict(Next(location=_LOC))
        assert data["location"] == {
            "_type": "SourceLocation",
            "line": 3,
            "start_col": 1,
            "end_col": 5,
            "filename": "apache.mtail",
        }

    def test_enums_stored_by_name(self) -> None:
        decl = to_dict(Declaration(location=_LOC, kind=MetricKind.GAUGE, name="g"))
        assert decl["kind"] == "GAUGE"
        expr = to_dict(
            BinaryExpr(
                location=_LOC,
                lhs=Identifier(location=_LOC, name="a"),
                op=Operator.ADD_ASSIGN,
                rhs=NumericExpr(location=_LOC, value=1),
            )
        )
        assert expr["op"] == "ADD_ASSIGN"

    def test_tuples_become_lists(self) -> None:
        data = to_dict(Declaration(location=_LOC, kind=MetricKind.COUNTER, name="c", keys=("a", "b")))
        assert data["keys"] == ["a", "b"]

    def test_missing_optional_child_is_null(self) -> None:
        assert to_dict(Builtin(location=_LOC, name="f"))["args"] is None


class TestRoundTrip:
    def test_dict_round_trip(self) -> None:
        program = _program()
        assert from_dict(to_dict(program)) == program

    def test_json_round_trip(self) -> None:
        program = _program()
        assert from_json(to_json(program)) == program

    def test_round_trip_renders_identically(self) -> None:
        program = _program()
        assert unparse(from_json(to_json(program))) == unparse(program)

    def test_json_is_deterministic(self) -> None:
        assert to_json(_program()) == to_json(_program())

    def test_indent_from_config(self) -> None:
        node = Next(location=_LOC)
        with config_context(TailprogConfig(json_indent=2)):
            assert to_json(node) == json.dumps(to_dict(node), sort_keys=True, indent=2)

    def test_explicit_indent_wins(self) -> None:
        node = Next(location=_LOC)
        with config_context(TailprogConfig(json_indent=2)):
            assert "\n    " in to_json(node, indent=4)


class TestFromDictErrors:
    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing '_type'"):
            from_dict({"name": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type: 'Histogram'"):
            from_dict({"_type": "Histogram"})

    def test_unknown_operator(self) -> None:
        data = to_dict(
            UnaryExpr(location=_LOC, op=Operator.INC, operand=Identifier(location=_LOC, name="x"))
        )
        data["op"] = "DEC"
        with pytest.raises(ValueError, match="Unknown Operator member: 'DEC'"):
            from_dict(data)

    def test_unknown_metric_kind(self) -> None:
        data = to_dict(Declaration(location=_LOC, kind=MetricKind.COUNTER, name="c"))
        data["kind"] = "HISTOGRAM"
        with pytest.raises(ValueError, match="Unknown MetricKind member"):
            from_dict(data)

    def test_missing_required_field(self) -> None:
        with pytest.raises(ValueError, match="Cannot build Identifier"):
            from_dict({"_type": "Identifier", "location": to_dict(Next(location=_LOC))["location"]})

    def test_depth_limit(self) -> None:
        node = StatementList(location=_LOC, children=(Next(location=_LOC),))
        for _ in range(5):
            node = StatementList(location=_LOC, children=(node,))
        data = to_dict(node)
        with config_context(TailprogConfig(max_depth=3)):
            with pytest.raises(ValueError, match="max_depth=3"):
                from_dict(data)
        assert from_dict(data) == node

    def test_json_not_an_object(self) -> None:
        with pytest.raises(ValueError, match="Expected a serialized node"):
            from_json("[1, 2]")

    def test_invalid_json(self) -> None:
        with pytest.raises(ValueError):
            from_json("{not json")

    def test_location_without_line(self) -> None:
        data = {"_type": "Next", "location": {"_type": "SourceLocation"}}
        with pytest.raises(ValueError, match="integer 'line'"):
            from_dict(data)

    def test_location_with_non_integer_line(self) -> None:
        data = {"_type": "Next", "location": {"_type": "SourceLocation", "line": "3"}}
        with pytest.raises(ValueError, match="integer 'line'"):
            from_dict(data)

    @pytest.mark.parametrize("type_field", [["Next"], {"name": "Next"}, 7])
    def test_type_field_not_a_string(self, type_field: object) -> None:
        with pytest.raises(ValueError, match="Invalid '_type' field"):
            from_dict({"_type": type_field})

    def test_unhashable_operator_name(self) -> None:
        data = to_dict(
            UnaryExpr(location=_LOC, op=Operator.NOT, operand=Identifier(location=_LOC, name="x"))
        )
        data["op"] = ["NOT"]
        with pytest.raises(ValueError, match="Unknown Operator member"):
            from_dict(data)
