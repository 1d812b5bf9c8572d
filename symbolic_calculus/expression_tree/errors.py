"""Exceptions raised by the expression tree operations."""


class ExpressionError(Exception):
  """Base class for failures raised while operating on an expression tree."""


class UnboundVariableError(ExpressionError, ValueError):
  """Raised by evaluate() when it reaches a variable; there is no environment to bind it."""

  def __init__(self, name: str):
    super().__init__(f"Cannot evaluate unbound variable '{name}'")
    self.name = name


class DerivativeUnsupportedError(ExpressionError, NotImplementedError):
  """Raised by differentiate() when a node's operator has no derivative rule."""

  def __init__(self, operator):
    super().__init__(f"No derivative rule for operator {operator!r}")
    self.operator = operator


class UnknownOperatorError(ExpressionError, ValueError):
  """Operator tag is not valid for the node it sits on."""

  def __init__(self, operator, node_kind: str = 'node'):
    super().__init__(f"Unknown operator {operator!r} on {node_kind}")
    self.operator = operator


class InvalidExpressionError(ExpressionError, ValueError):
  """Raised by the validator for a malformed hand-built tree."""
