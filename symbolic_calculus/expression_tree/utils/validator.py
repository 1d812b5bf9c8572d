from ..core.node import Node, ConstantNode, BinaryOpNode, UnaryOpNode, VariableNode
from ..core.operators import BINARY_OPS, UNARY_OPS
from ..errors import InvalidExpressionError


class ExpressionValidator:
  """Structural checks for trees assembled by hand.

  The construction API never validates its inputs, so a caller that builds
  nodes directly can end up with a missing child or a unary tag on a binary
  node. These checks catch that before evaluate/differentiate do.
  """

  @staticmethod
  def is_valid_expression(node: Node) -> bool:
    try:
      ExpressionValidator.validate(node)
    except InvalidExpressionError:
      return False
    return True

  @staticmethod
  def validate(node: Node) -> None:
    """Raise InvalidExpressionError describing the first structural problem found."""
    stack = [(node, 'root')]
    while stack:
      current, path = stack.pop()
      ExpressionValidator._validate_node(current, path)
      if isinstance(current, BinaryOpNode):
        stack.append((current.right, f"{path}.right"))
        stack.append((current.left, f"{path}.left"))
      elif isinstance(current, UnaryOpNode):
        stack.append((current.operand, f"{path}.operand"))

  @staticmethod
  def _validate_node(node, path: str) -> None:
    if not isinstance(node, Node):
      raise InvalidExpressionError(f"{path}: expected a Node, got {type(node).__name__}")

    # Nodes made with __new__ and never initialised lack their fields
    for field in type(node).__slots__:
      if not hasattr(node, field):
        raise InvalidExpressionError(f"{path}: {type(node).__name__} has no '{field}'")

    if isinstance(node, VariableNode):
      if not isinstance(node.name, str) or not node.name:
        raise InvalidExpressionError(f"{path}: variable name must be a non-empty string")

    elif isinstance(node, UnaryOpNode):
      if node.operator not in UNARY_OPS:
        raise InvalidExpressionError(f"{path}: {node.operator!r} is not a unary operator")

    elif isinstance(node, BinaryOpNode):
      if node.operator not in BINARY_OPS:
        raise InvalidExpressionError(f"{path}: {node.operator!r} is not a binary operator")

    elif not isinstance(node, ConstantNode):
      raise InvalidExpressionError(f"{path}: unsupported node class {type(node).__name__}")
