"""Core expression tree components."""

from .node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from .operators import (
    NodeType, OpType, BINARY_OPS, UNARY_OPS, BINARY_OP_MAP, UNARY_OP_MAP, OP_SYMBOLS,
    LITERAL_FORMAT, evaluate_binary_op, evaluate_unary_op
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode',
    'NodeType', 'OpType', 'BINARY_OPS', 'UNARY_OPS', 'BINARY_OP_MAP', 'UNARY_OP_MAP',
    'OP_SYMBOLS', 'LITERAL_FORMAT', 'evaluate_binary_op', 'evaluate_unary_op'
]
