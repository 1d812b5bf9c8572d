import io
import math

import pytest

from symbolic_calculus import demo, evaluate, to_string, UnboundVariableError
from symbolic_calculus.logging_system import LogLevel, configure_logging


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    configure_logging(log_level=LogLevel.MINIMAL, stream=stream)
    yield stream
    configure_logging(log_level=LogLevel.SILENT)


class TestDemo:
    def test_output_lines(self, log_stream):
        out = io.StringIO()

        demo.run_demo(out)

        lines = out.getvalue().splitlines()
        assert lines[0].startswith(
            "expr3 = log(((2.000000 * (2.000000 + ((sin(3.000000) / 2.000000) + 3.000000)))"
            " - 3.000000)) expr3.eval() = "
        )
        assert lines[1] == "expr4 = log(foo)"
        assert lines[2] == "expr5 = (0.000000 / foo)"
        assert lines[3] == "expr6 = (1.000000 / foo)"
        assert lines[4].startswith("expr3 + expr4 + expr5 + expr6 = (((log(")
        assert lines[4].endswith(" + log(foo)) + (0.000000 / foo)) + (1.000000 / foo))")
        assert lines[5] == "expr7 = (sin(x) * exp(x))"

    def test_expr3_value(self, log_stream):
        exprs = demo.run_demo(io.StringIO())

        expected = math.log(2.0 * (2.0 + (math.sin(3.0) / 2.0 + 3.0)) - 3.0)
        assert evaluate(exprs["expr3"]) == pytest.approx(expected)

    def test_derivative_at_point(self, log_stream):
        out = io.StringIO()

        demo.run_demo(out)

        expected = math.exp(0.5) * (math.cos(0.5) + math.sin(0.5))
        assert out.getvalue().splitlines()[-1] == f"d(expr7)/dx at x=0.5 = {expected:g}"

    def test_failures_are_logged_and_reraised(self, log_stream, monkeypatch):
        def broken():
            return {k: demo.variable("q") for k in ("expr3", "expr4", "expr5", "expr6", "expr7")}

        monkeypatch.setattr(demo, "build_sample_expressions", broken)

        with pytest.raises(UnboundVariableError):
            demo.run_demo(io.StringIO())
        assert "unbound variable 'q'" in log_stream.getvalue()

    def test_sample_trees_share_literals(self):
        exprs = demo.build_sample_expressions()
        expr3 = exprs["expr3"]

        # log((a * (a + ...)) - b): both uses of a are the same node
        product = expr3.operand.left
        assert product.left is product.right.left
        assert to_string(product.left) == "2.000000"
