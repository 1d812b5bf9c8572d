"""Utilities for expression trees."""

from .sympy_utils import to_sympy, from_sympy
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, calculate_tree_size,
    find_nodes_by_type, find_nodes_by_operator,
    get_constants, get_variables, substitute
)

__all__ = [
    'to_sympy', 'from_sympy', 'ExpressionValidator',
    'get_all_nodes', 'calculate_tree_depth', 'calculate_tree_size',
    'find_nodes_by_type', 'find_nodes_by_operator',
    'get_constants', 'get_variables', 'substitute'
]
