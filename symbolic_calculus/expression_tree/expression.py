from typing import List, Mapping, Optional, Union
from numbers import Real
import sympy as sp

from .core.node import Node
from .evaluator import evaluate
from .differentiator import differentiate
from .printer import to_string
from .utils.tree_utils import calculate_tree_depth, calculate_tree_size, get_variables, substitute
from .utils.sympy_utils import to_sympy


class Expression:
  """Expression class wrapping a root node"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    self.root = root
    self._string_cache: Optional[str] = None

  def evaluate(self) -> float:
    return evaluate(self.root)

  def differentiate(self, wrt: str) -> 'Expression':
    return Expression(differentiate(self.root, wrt))

  def to_string(self) -> str:
    # Trees are immutable, so the cached text never goes stale
    if self._string_cache is None:
      self._string_cache = to_string(self.root)
    return self._string_cache

  def to_sympy(self) -> sp.Expr:
    return to_sympy(self.root)

  def size(self) -> int:
    """Node count"""
    return calculate_tree_size(self.root)

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def variables(self) -> List[str]:
    return get_variables(self.root)

  def substitute(self, bindings: Mapping[str, Union[Real, Node]]) -> 'Expression':
    return Expression(substitute(self.root, bindings))

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return NotImplemented
    return self.root == other.root
