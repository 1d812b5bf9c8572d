"""
Tree Utility Functions

Traversal and analysis helpers shared by the expression tree modules.
None of these mutate their input; functions that produce a tree build a new
one and share every untouched subtree with the original.
"""

from collections import deque
from numbers import Real
from typing import Dict, List, Mapping, Union

from ..core.node import Node, BinaryOpNode, UnaryOpNode, ConstantNode, VariableNode
from ..core.operators import OpType


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    A subtree referenced from several parents is listed once per reference.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (iterative)"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        # Reverse so the left child is visited first
        stack.extend(reversed(current_node.children()))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    if isinstance(node, (ConstantNode, VariableNode)):
        return 1
    elif isinstance(node, UnaryOpNode):
        return 1 + calculate_tree_depth(node.operand)
    elif isinstance(node, BinaryOpNode):
        left_depth = calculate_tree_depth(node.left)
        right_depth = calculate_tree_depth(node.right)
        return 1 + max(left_depth, right_depth)
    else:
        return 1


def calculate_tree_size(node: Node) -> int:
    """Node count; shared subtrees are counted once per reference."""
    return len(_depth_first_traversal(node))


def find_nodes_by_type(node: Node, node_type: type) -> List[Node]:
    """Find all nodes of a specific class in the tree."""
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, node_type)]


def find_nodes_by_operator(node: Node, operator: OpType) -> List[Node]:
    """Find all operator nodes carrying the given tag."""
    return [
        n for n in get_all_nodes(node, 'depth_first')
        if isinstance(n, (BinaryOpNode, UnaryOpNode)) and n.operator == operator
    ]


def get_constants(node: Node) -> List[ConstantNode]:
    return find_nodes_by_type(node, ConstantNode)


def get_variables(node: Node) -> List[str]:
    """Sorted distinct variable names used in the tree."""
    return sorted({n.name for n in find_nodes_by_type(node, VariableNode)})


def substitute(node: Node, bindings: Mapping[str, Union[Real, Node]]) -> Node:
    """
    Replace variables by values.

    Args:
        node: Root node of the tree
        bindings: variable name -> number or replacement node. Numbers are
            wrapped as constants.

    Returns:
        A new tree. Subtrees without any bound variable are returned as is,
        so the result shares them with the input.
    """
    replacements: Dict[str, Node] = {
        name: value if isinstance(value, Node) else ConstantNode(value)
        for name, value in bindings.items()
    }

    def _substitute(current_node: Node) -> Node:
        if isinstance(current_node, VariableNode):
            return replacements.get(current_node.name, current_node)
        elif isinstance(current_node, UnaryOpNode):
            operand = _substitute(current_node.operand)
            if operand is current_node.operand:
                return current_node
            return UnaryOpNode(current_node.operator, operand)
        elif isinstance(current_node, BinaryOpNode):
            left = _substitute(current_node.left)
            right = _substitute(current_node.right)
            if left is current_node.left and right is current_node.right:
                return current_node
            return BinaryOpNode(current_node.operator, left, right)
        return current_node

    return _substitute(node)
