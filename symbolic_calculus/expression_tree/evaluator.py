from .core.node import Node
from .core.operators import NodeType, evaluate_binary_op, evaluate_unary_op
from .errors import UnboundVariableError, UnknownOperatorError


def evaluate(node: Node) -> float:
  """Numerically evaluate an expression tree.

  Children are evaluated before their parent combines them. Floating point
  domain problems (log of a non-positive number, division by zero, overflow)
  are not errors; they come back as nan or +/-inf.

  Raises:
      UnboundVariableError: the tree contains a variable.
      UnknownOperatorError: a node carries an operator tag invalid for its arity.
  """
  node_type = node.node_type
  if node_type == NodeType.CONSTANT:
    return node.value
  elif node_type == NodeType.VARIABLE:
    raise UnboundVariableError(node.name)
  elif node_type == NodeType.UNARY_OP:
    operand_val = evaluate(node.operand)
    result = evaluate_unary_op(operand_val, node.operator)
    if result is None:
      raise UnknownOperatorError(node.operator, 'unary node')
    return result
  elif node_type == NodeType.BINARY_OP:
    left_val = evaluate(node.left)
    right_val = evaluate(node.right)
    result = evaluate_binary_op(left_val, right_val, node.operator)
    if result is None:
      raise UnknownOperatorError(node.operator, 'binary node')
    return result
  raise UnknownOperatorError(node_type, 'node')
