from abc import ABC, abstractmethod
from numbers import Real
from typing import Optional, Tuple
from .operators import NodeType, OpType


def _as_node(value) -> 'Node':
  """Wrap plain numbers so they can take part in infix expressions."""
  if isinstance(value, Node):
    return value
  if isinstance(value, Real):
    return ConstantNode(value)
  return NotImplemented


class Node(ABC):
  """Immutable expression tree node.

  Nodes never change after construction, so subtrees can be shared freely
  between trees (including between a tree and its derivative).
  """

  __slots__ = ('_hash_cache',)

  node_type: NodeType

  def __init__(self):
    object.__setattr__(self, '_hash_cache', None)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  @abstractmethod
  def _same_payload(self, other: 'Node') -> bool:
    """Compare this node's own data (value, name or operator), not its children."""
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      object.__setattr__(self, '_hash_cache', self._compute_hash())
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if not isinstance(other, Node):
      return NotImplemented
    return _nodes_equal(self, other, set())

  def __ne__(self, other) -> bool:
    result = self.__eq__(other)
    if result is NotImplemented:
      return result
    return not result

  # Immutable, so copies can be the node itself
  def __copy__(self):
    return self

  def __deepcopy__(self, memo):
    return self

  def __str__(self) -> str:
    from ..printer import to_string
    return to_string(self)

  # Infix builders: a + b is add(a, b), and so on
  def __add__(self, other):
    other = _as_node(other)
    if other is NotImplemented:
      return other
    return BinaryOpNode(OpType.ADD, self, other)

  def __radd__(self, other):
    other = _as_node(other)
    if other is NotImplemented:
      return other
    return BinaryOpNode(OpType.ADD, other, self)

  def __sub__(self, other):
    other = _as_node(other)
    if other is NotImplemented:
      return other
    return BinaryOpNode(OpType.SUB, self, other)

  def __rsub__(self, other):
    other = _as_node(other)
    if other is NotImplemented:
      return other
    return BinaryOpNode(OpType.SUB, other, self)

  def __mul__(self, other):
    other = _as_node(other)
    if other is NotImplemented:
      return other
    return BinaryOpNode(OpType.MUL, self, other)

  def __rmul__(self, other):
    other = _as_node(other)
    if other is NotImplemented:
      return other
    return BinaryOpNode(OpType.MUL, other, self)

  def __truediv__(self, other):
    other = _as_node(other)
    if other is NotImplemented:
      return other
    return BinaryOpNode(OpType.DIV, self, other)

  def __rtruediv__(self, other):
    other = _as_node(other)
    if other is NotImplemented:
      return other
    return BinaryOpNode(OpType.DIV, other, self)

  def __neg__(self):
    return UnaryOpNode(OpType.NEG, self)


class VariableNode(Node):
  __slots__ = ('name',)

  node_type = NodeType.VARIABLE

  def __init__(self, name: str):
    super().__init__()
    object.__setattr__(self, 'name', name)

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))

  def _same_payload(self, other: 'VariableNode') -> bool:
    return self.name == other.name

  def __reduce__(self):
    return (VariableNode, (self.name,))

  def __repr__(self) -> str:
    return f"VariableNode({self.name!r})"


class ConstantNode(Node):
  __slots__ = ('value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    super().__init__()
    object.__setattr__(self, 'value', float(value))

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.value))

  def _same_payload(self, other: 'ConstantNode') -> bool:
    return self.value == other.value

  def __reduce__(self):
    return (ConstantNode, (self.value,))

  def __repr__(self) -> str:
    return f"ConstantNode({self.value!r})"


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  node_type = NodeType.BINARY_OP

  def __init__(self, operator: OpType, left: Node, right: Node):
    super().__init__()
    object.__setattr__(self, 'operator', operator)
    object.__setattr__(self, 'left', left)
    object.__setattr__(self, 'right', right)

  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.operator, hash(self.left), hash(self.right)))

  def _same_payload(self, other: 'BinaryOpNode') -> bool:
    return self.operator == other.operator

  def __reduce__(self):
    return (BinaryOpNode, (self.operator, self.left, self.right))

  def __repr__(self) -> str:
    return f"BinaryOpNode({_op_name(self.operator)}, {self.left!r}, {self.right!r})"


class UnaryOpNode(Node):
  __slots__ = ('operator', 'operand')

  node_type = NodeType.UNARY_OP

  def __init__(self, operator: OpType, operand: Node):
    super().__init__()
    object.__setattr__(self, 'operator', operator)
    object.__setattr__(self, 'operand', operand)

  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)

  def _compute_hash(self) -> int:
    return hash((NodeType.UNARY_OP, self.operator, hash(self.operand)))

  def _same_payload(self, other: 'UnaryOpNode') -> bool:
    return self.operator == other.operator

  def __reduce__(self):
    return (UnaryOpNode, (self.operator, self.operand))

  def __repr__(self) -> str:
    return f"UnaryOpNode({_op_name(self.operator)}, {self.operand!r})"


def _op_name(operator: Optional[OpType]) -> str:
  return operator.name if isinstance(operator, OpType) else repr(operator)


def _nodes_equal(a, b, seen: set) -> bool:
  """Structural equality that visits each shared (a, b) pair once.

  ``seen`` holds id pairs already proven equal, so comparing two DAGs with
  heavy sharing stays linear in the number of distinct nodes.
  """
  if a is b:
    return True
  if not isinstance(a, Node) or not isinstance(b, Node):
    return a == b
  if a.node_type != b.node_type or hash(a) != hash(b):
    return False
  key = (id(a), id(b))
  if key in seen:
    return True
  if not a._same_payload(b):
    return False
  for child_a, child_b in zip(a.children(), b.children()):
    if not _nodes_equal(child_a, child_b, seen):
      return False
  seen.add(key)
  return True
