from .core.node import Node
from .core.operators import NodeType, OpType, OP_SYMBOLS, BINARY_OPS, UNARY_OPS, LITERAL_FORMAT
from .errors import UnknownOperatorError


def format_literal(value: float) -> str:
  return LITERAL_FORMAT.format(value)


def to_string(node: Node) -> str:
  """Render a tree as text.

  Every binary operation is wrapped in parentheses, unary functions use
  call syntax and negation is a bare '-' prefix. No simplification and no
  precedence-based parenthesis removal.

  Raises:
      UnknownOperatorError: a node carries an operator tag invalid for its arity.
  """
  node_type = node.node_type
  if node_type == NodeType.CONSTANT:
    return format_literal(node.value)
  elif node_type == NodeType.VARIABLE:
    return node.name
  elif node_type == NodeType.UNARY_OP:
    if node.operator not in UNARY_OPS:
      raise UnknownOperatorError(node.operator, 'unary node')
    inner = to_string(node.operand)
    if node.operator == OpType.NEG:
      return f"-{inner}"
    return f"{OP_SYMBOLS[node.operator]}({inner})"
  elif node_type == NodeType.BINARY_OP:
    if node.operator not in BINARY_OPS:
      raise UnknownOperatorError(node.operator, 'binary node')
    return f"({to_string(node.left)} {OP_SYMBOLS[node.operator]} {to_string(node.right)})"
  raise UnknownOperatorError(node_type, 'node')
