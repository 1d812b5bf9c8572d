"""Expression Tree Module

Immutable expression trees with numeric evaluation, symbolic
differentiation and text rendering.
"""

from .expression import Expression
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP,
)
from .construction import (
    literal, variable,
    negate, exp, log, sin, cos,
    add, subtract, multiply, divide,
    unary, binary,
)
from .evaluator import evaluate
from .differentiator import differentiate
from .printer import to_string, format_literal
from .errors import (
    ExpressionError,
    UnboundVariableError,
    DerivativeUnsupportedError,
    UnknownOperatorError,
    InvalidExpressionError,
)
from .utils import ExpressionValidator, to_sympy, from_sympy, substitute

__all__ = [
    "Expression",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
    "NodeType", "OpType",
    "BINARY_OP_MAP", "UNARY_OP_MAP",
    "literal", "variable",
    "negate", "exp", "log", "sin", "cos",
    "add", "subtract", "multiply", "divide",
    "unary", "binary",
    "evaluate", "differentiate", "to_string", "format_literal",
    "ExpressionError", "UnboundVariableError", "DerivativeUnsupportedError",
    "UnknownOperatorError", "InvalidExpressionError",
    "ExpressionValidator", "to_sympy", "from_sympy", "substitute"
]
