"""Factory functions for building expression trees.

All builders are O(1): they wrap the given children without copying or
validating them. Children may be shared between several parents.
"""

from .core.node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from .core.operators import OpType, UNARY_OP_MAP, BINARY_OP_MAP


def literal(value: float) -> ConstantNode:
  return ConstantNode(value)


def variable(name: str) -> VariableNode:
  return VariableNode(name)


def negate(operand: Node) -> UnaryOpNode:
  return UnaryOpNode(OpType.NEG, operand)


def exp(operand: Node) -> UnaryOpNode:
  return UnaryOpNode(OpType.EXP, operand)


def log(operand: Node) -> UnaryOpNode:
  """Natural logarithm."""
  return UnaryOpNode(OpType.LOG, operand)


def sin(operand: Node) -> UnaryOpNode:
  return UnaryOpNode(OpType.SIN, operand)


def cos(operand: Node) -> UnaryOpNode:
  return UnaryOpNode(OpType.COS, operand)


def add(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.ADD, left, right)


def subtract(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.SUB, left, right)


def multiply(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.MUL, left, right)


def divide(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.DIV, left, right)


def unary(operator: str, operand: Node) -> UnaryOpNode:
  """Build a unary node from its textual name ('neg', 'exp', 'log', 'sin', 'cos')."""
  return UnaryOpNode(UNARY_OP_MAP[operator], operand)


def binary(operator: str, left: Node, right: Node) -> BinaryOpNode:
  """Build a binary node from its symbol ('+', '-', '*', '/')."""
  return BinaryOpNode(BINARY_OP_MAP[operator], left, right)
