"""Symbolic differentiation.

Every derivative is a brand-new tree; the input is never touched. Results
refer back to the original operand subtrees instead of copying them. No
simplification is applied, so d/dx(2 + x) comes out as (0.000000 + 1.000000).
"""

from .core.node import Node
from .core.operators import NodeType, OpType
from .construction import (
    literal, negate, exp, sin, cos,
    add, subtract, multiply, divide,
)
from .errors import DerivativeUnsupportedError


def differentiate(node: Node, wrt: str) -> Node:
  """Differentiate ``node`` with respect to the variable named ``wrt``.

  Raises:
      DerivativeUnsupportedError: a node's operator has no derivative rule.
  """
  node_type = node.node_type
  if node_type == NodeType.CONSTANT:
    return literal(0.0)
  elif node_type == NodeType.VARIABLE:
    return literal(1.0) if node.name == wrt else literal(0.0)
  elif node_type == NodeType.UNARY_OP:
    return _differentiate_unary(node, wrt)
  elif node_type == NodeType.BINARY_OP:
    return _differentiate_binary(node, wrt)
  raise DerivativeUnsupportedError(node_type)


def _differentiate_unary(node: Node, wrt: str) -> Node:
  operator = node.operator
  u = node.operand
  if operator not in _UNARY_RULES:
    raise DerivativeUnsupportedError(operator)
  du = differentiate(u, wrt)
  return _UNARY_RULES[operator](u, du)


def _differentiate_binary(node: Node, wrt: str) -> Node:
  operator = node.operator
  u, v = node.left, node.right
  if operator not in _BINARY_RULES:
    raise DerivativeUnsupportedError(operator)
  du = differentiate(u, wrt)
  dv = differentiate(v, wrt)
  return _BINARY_RULES[operator](u, v, du, dv)


# Chain rule for each unary function, given the operand u and its derivative du
_UNARY_RULES = {
    OpType.NEG: lambda u, du: negate(du),
    OpType.EXP: lambda u, du: multiply(exp(u), du),
    OpType.LOG: lambda u, du: divide(du, u),
    OpType.SIN: lambda u, du: multiply(du, cos(u)),
    OpType.COS: lambda u, du: multiply(du, negate(sin(u))),
}

_BINARY_RULES = {
    OpType.ADD: lambda u, v, du, dv: add(du, dv),
    OpType.SUB: lambda u, v, du, dv: subtract(du, dv),
    # (uv)' = u'v + uv'
    OpType.MUL: lambda u, v, du, dv: add(multiply(du, v), multiply(u, dv)),
    # (u/v)' = (u'v - uv') / (v*v)
    OpType.DIV: lambda u, v, du, dv: divide(
        subtract(multiply(du, v), multiply(u, dv)),
        multiply(v, v),
    ),
}
