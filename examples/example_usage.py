import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import sympy as sp
from symbolic_calculus import (
  Expression, variable, literal, sin, cos, exp, log,
  evaluate, differentiate, to_string, substitute,
)


def tangent_line_demo():
  """Slope of f(x) = x * sin(x) along a grid, computed from the symbolic derivative"""
  x = variable("x")
  f = x * sin(x)
  df = differentiate(f, "x")
  print(f"f(x)  = {to_string(f)}")
  print(f"f'(x) = {to_string(df)}")

  for point in np.linspace(0.0, np.pi, 5):
    value = evaluate(substitute(f, {"x": point}))
    slope = evaluate(substitute(df, {"x": point}))
    print(f"  x={point:.3f}  f={value:+.6f}  f'={slope:+.6f}")


def sympy_cross_check():
  """Compare our derivative with SymPy's on a quotient of transcendental functions"""
  x = variable("x")
  g = Expression(exp(x) / (literal(1.0) + cos(x) * cos(x)))
  dg = g.differentiate("x")

  expected = sp.diff(g.to_sympy(), sp.Symbol("x"))
  difference = sp.simplify(dg.to_sympy() - expected)
  print(f"g(x)  = {g}")
  print(f"g'(x) = {dg}")
  print(f"difference from sympy.diff: {difference}")


def domain_errors_demo():
  """Floating point domain problems come back as IEEE values, not exceptions"""
  print(f"log(-1) = {evaluate(log(literal(-1.0)))}")
  print(f"1 / 0   = {evaluate(literal(1.0) / literal(0.0))}")
  print(f"0 / 0   = {evaluate(literal(0.0) / literal(0.0))}")


def main():
  tangent_line_demo()
  print()
  sympy_cross_check()
  print()
  domain_errors_demo()


if __name__ == "__main__":
  main()
