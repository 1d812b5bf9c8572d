import sympy as sp
from functools import reduce

from ..core.node import Node, ConstantNode, VariableNode, BinaryOpNode, UnaryOpNode
from ..core.operators import NodeType, OpType
from ..errors import UnknownOperatorError


def to_sympy(node: Node) -> sp.Expr:
  """Convert an expression tree into the equivalent SymPy expression.

  SymPy evaluates as it builds, so the result is usually already in canonical
  form; the tree itself is left as is.
  """
  node_type = node.node_type
  if node_type == NodeType.CONSTANT:
    return sp.Float(node.value)
  elif node_type == NodeType.VARIABLE:
    return sp.Symbol(node.name)
  elif node_type == NodeType.UNARY_OP:
    operand_sympy = to_sympy(node.operand)
    if node.operator == OpType.NEG:
      return -operand_sympy
    elif node.operator == OpType.EXP:
      return sp.exp(operand_sympy)
    elif node.operator == OpType.LOG:
      return sp.log(operand_sympy)
    elif node.operator == OpType.SIN:
      return sp.sin(operand_sympy)
    elif node.operator == OpType.COS:
      return sp.cos(operand_sympy)
    raise UnknownOperatorError(node.operator, 'unary node')
  elif node_type == NodeType.BINARY_OP:
    left = to_sympy(node.left)
    right = to_sympy(node.right)
    if node.operator == OpType.ADD:
      return sp.Add(left, right)
    elif node.operator == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right))
    elif node.operator == OpType.MUL:
      return sp.Mul(left, right)
    elif node.operator == OpType.DIV:
      return sp.Mul(left, sp.Pow(right, -1))
    raise UnknownOperatorError(node.operator, 'binary node')
  raise UnknownOperatorError(node_type, 'node')


def from_sympy(expr: sp.Expr) -> Node:
  """Convert a SymPy expression built from +, *, exp, log, sin, cos back into a tree.

  n-ary sums and products fold from the left. Powers are only supported for
  exponent -1 (becomes 1/b) and positive integer exponents (repeated
  multiplication).

  Raises:
      UnknownOperatorError: the expression uses anything else.
  """
  if expr.is_Symbol:
    return VariableNode(expr.name)
  if expr.is_number and expr.is_real:
    return ConstantNode(float(expr))
  if isinstance(expr, sp.Add):
    return reduce(lambda a, b: BinaryOpNode(OpType.ADD, a, b), [from_sympy(arg) for arg in expr.args])
  if isinstance(expr, sp.Mul):
    return reduce(lambda a, b: BinaryOpNode(OpType.MUL, a, b), [from_sympy(arg) for arg in expr.args])
  if isinstance(expr, sp.Pow):
    base, exponent = expr.args
    if exponent == -1:
      return BinaryOpNode(OpType.DIV, ConstantNode(1.0), from_sympy(base))
    if exponent.is_Integer and exponent > 0:
      base_node = from_sympy(base)
      return reduce(lambda a, b: BinaryOpNode(OpType.MUL, a, b), [base_node] * int(exponent))
    raise UnknownOperatorError(expr.func, 'sympy expression')
  if isinstance(expr, sp.exp):
    return UnaryOpNode(OpType.EXP, from_sympy(expr.args[0]))
  if isinstance(expr, sp.log):
    if len(expr.args) != 1:
      raise UnknownOperatorError(expr.func, 'sympy expression')
    return UnaryOpNode(OpType.LOG, from_sympy(expr.args[0]))
  if isinstance(expr, sp.sin):
    return UnaryOpNode(OpType.SIN, from_sympy(expr.args[0]))
  if isinstance(expr, sp.cos):
    return UnaryOpNode(OpType.COS, from_sympy(expr.args[0]))
  raise UnknownOperatorError(expr.func, 'sympy expression')
