"""Demonstration driver.

Builds a handful of sample expressions, prints them with their values and
derivatives, and reports any failure from the expression core through the
logging system before re-raising it.
"""

import sys
from typing import Dict, Optional, TextIO

from .expression_tree import (
    Node, literal, variable, log, sin, exp,
    add, subtract, multiply, divide,
    evaluate, differentiate, to_string, substitute,
    ExpressionError,
)
from .logging_system import LogLevel, configure_logging, log_error, log_milestone, log_debug


def build_sample_expressions() -> Dict[str, Node]:
  """The sample trees shown by the demo; a and b are shared between several parents."""
  a = literal(2.0)
  b = literal(3.0)
  expr3 = log(subtract(multiply(a, add(a, add(divide(sin(b), a), b))), b))
  expr4 = log(variable("foo"))
  expr5 = differentiate(expr4, "a")
  expr6 = differentiate(expr4, "foo")
  x = variable("x")
  expr7 = multiply(sin(x), exp(x))
  return {
      "expr3": expr3,
      "expr4": expr4,
      "expr5": expr5,
      "expr6": expr6,
      "expr7": expr7,
  }


def run_demo(stream: Optional[TextIO] = None) -> Dict[str, Node]:
  """Print the sample expressions to ``stream`` (stdout by default).

  Raises:
      ExpressionError: whatever the expression core raised; it is logged first.
  """
  out = stream if stream is not None else sys.stdout
  try:
    exprs = build_sample_expressions()
    expr3, expr4, expr5, expr6, expr7 = (exprs[k] for k in ("expr3", "expr4", "expr5", "expr6", "expr7"))

    print(f"expr3 = {to_string(expr3)} expr3.eval() = {evaluate(expr3):g}", file=out)
    print(f"expr4 = {to_string(expr4)}", file=out)
    print(f"expr5 = {to_string(expr5)}", file=out)
    print(f"expr6 = {to_string(expr6)}", file=out)
    print(f"expr3 + expr4 + expr5 + expr6 = {to_string(expr3 + expr4 + expr5 + expr6)}", file=out)

    d7 = differentiate(expr7, "x")
    log_debug(f"d/dx {to_string(expr7)} has {len(to_string(d7))} characters")
    print(f"expr7 = {to_string(expr7)}", file=out)
    print(f"d(expr7)/dx = {to_string(d7)}", file=out)
    print(f"d(expr7)/dx at x=0.5 = {evaluate(substitute(d7, {'x': 0.5})):g}", file=out)
    exprs["d7"] = d7
  except ExpressionError as e:
    log_error(str(e))
    raise

  log_milestone("demo finished")
  return exprs


def main(log_level: LogLevel = LogLevel.MINIMAL) -> int:
  configure_logging(log_level=log_level, stream=sys.stderr)
  run_demo()
  return 0
