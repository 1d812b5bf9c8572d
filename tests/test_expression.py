import math

import pytest
import sympy as sp

from symbolic_calculus import (
    Expression, literal, variable, sin, exp, add, multiply,
    UnboundVariableError,
)


class TestExpression:
    def test_evaluate_and_print(self):
        expr = Expression(add(literal(2.0), literal(3.0)))

        assert expr.evaluate() == 5.0
        assert expr.to_string() == "(2.000000 + 3.000000)"
        assert str(expr) == expr.to_string()

    def test_differentiate_returns_expression(self, x):
        expr = Expression(sin(x))
        derivative = expr.differentiate("x")

        assert isinstance(derivative, Expression)
        assert derivative.to_string() == "(1.000000 * cos(x))"

    def test_unbound_variable(self, x):
        with pytest.raises(UnboundVariableError):
            Expression(exp(x)).evaluate()

    def test_substitute_then_evaluate(self, x):
        derivative = Expression(multiply(x, exp(x))).differentiate("x")

        value = derivative.substitute({"x": 1.0}).evaluate()

        assert value == pytest.approx(2.0 * math.e)

    def test_measurements(self, x, y):
        expr = Expression(add(multiply(x, y), sin(x)))

        assert expr.size() == 6
        assert expr.depth() == 3
        assert expr.variables() == ["x", "y"]

    def test_to_sympy(self, x):
        assert Expression(sin(x)).to_sympy() == sp.sin(sp.Symbol("x"))

    def test_equality_is_structural(self):
        first = Expression(sin(variable("x")))
        second = Expression(sin(variable("x")))

        assert first == second
        assert hash(first) == hash(second)
        assert first != Expression(exp(variable("x")))
        assert first != "sin(x)"

    def test_equality_defers_to_other_types(self):
        class MatchesAnything:
            def __eq__(self, other):
                return True

        expr = Expression(sin(variable("x")))

        assert expr.__eq__(MatchesAnything()) is NotImplemented
        assert expr == MatchesAnything()
        assert not (expr != MatchesAnything())
