import pytest

from symbolic_calculus import (
    BinaryOpNode, UnaryOpNode, OpType,
    literal, variable, negate, exp, log, sin, cos,
    add, subtract, multiply, divide,
    evaluate, to_string, UnknownOperatorError,
)
from symbolic_calculus.expression_tree import format_literal


class TestLiteralFormatting:
    @pytest.mark.parametrize(
        "value, text",
        [(2.0, "2.000000"), (-1.5, "-1.500000"), (0.0, "0.000000"),
         (1.0 / 3.0, "0.333333"), (1234567.0, "1234567.000000")],
    )
    def test_six_decimals(self, value, text):
        assert format_literal(value) == text
        assert to_string(literal(value)) == text

    def test_non_finite_values(self):
        assert to_string(literal(float("inf"))) == "inf"
        assert to_string(literal(float("-inf"))) == "-inf"
        assert to_string(literal(float("nan"))) == "nan"


class TestToString:
    def test_sum(self):
        expr = add(literal(2.0), literal(3.0))

        assert to_string(expr) == "(2.000000 + 3.000000)"
        assert evaluate(expr) == 5.0

    def test_variable_verbatim(self):
        assert to_string(variable("foo_Bar1")) == "foo_Bar1"

    def test_every_binary_op_parenthesized(self, x, y):
        assert to_string(subtract(x, y)) == "(x - y)"
        assert to_string(multiply(x, y)) == "(x * y)"
        assert to_string(divide(x, y)) == "(x / y)"
        assert to_string(add(multiply(x, y), x)) == "((x * y) + x)"

    def test_unary_functions(self, x):
        assert to_string(exp(x)) == "exp(x)"
        assert to_string(log(x)) == "log(x)"
        assert to_string(sin(x)) == "sin(x)"
        assert to_string(cos(x)) == "cos(x)"

    def test_negate_has_no_parentheses(self, x):
        assert to_string(negate(x)) == "-x"
        assert to_string(negate(literal(1.0))) == "-1.000000"
        assert to_string(negate(negate(x))) == "--x"
        assert to_string(negate(add(x, x))) == "-(x + x)"

    def test_nested_sample(self):
        a = literal(2.0)
        b = literal(3.0)
        expr = log(subtract(multiply(a, add(a, add(divide(sin(b), a), b))), b))

        assert to_string(expr) == (
            "log(((2.000000 * (2.000000 + ((sin(3.000000) / 2.000000) + 3.000000)))"
            " - 3.000000))"
        )

    def test_str_matches_to_string(self, x):
        expr = sin(add(x, literal(1.0)))

        assert str(expr) == to_string(expr) == "sin((x + 1.000000))"

    def test_shared_subtree_prints_like_copies(self):
        shared = literal(4.0)

        assert to_string(add(shared, shared)) == to_string(add(literal(4.0), literal(4.0)))

    def test_mismatched_operator_tag(self, x):
        with pytest.raises(UnknownOperatorError):
            to_string(UnaryOpNode(OpType.DIV, x))
        with pytest.raises(UnknownOperatorError):
            to_string(BinaryOpNode(OpType.NEG, x, x))
