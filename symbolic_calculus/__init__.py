"""
Symbolic Calculus Package

Expression trees that can be evaluated, differentiated symbolically and
printed.
"""

from .expression_tree import (
    Expression,
    Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
    NodeType, OpType,
    literal, variable,
    negate, exp, log, sin, cos,
    add, subtract, multiply, divide,
    evaluate, differentiate, to_string,
    ExpressionError, UnboundVariableError, DerivativeUnsupportedError,
    UnknownOperatorError, InvalidExpressionError,
    ExpressionValidator, to_sympy, from_sympy, substitute,
)
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"

__all__ = [
    'Expression',
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode',
    'NodeType', 'OpType',
    'literal', 'variable',
    'negate', 'exp', 'log', 'sin', 'cos',
    'add', 'subtract', 'multiply', 'divide',
    'evaluate', 'differentiate', 'to_string',
    'ExpressionError', 'UnboundVariableError', 'DerivativeUnsupportedError',
    'UnknownOperatorError', 'InvalidExpressionError',
    'ExpressionValidator', 'to_sympy', 'from_sympy', 'substitute',
    'LogLevel', 'configure_logging', 'get_logger', 'set_log_level',
]
