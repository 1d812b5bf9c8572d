import numpy as np
from enum import IntEnum

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  UNARY_OP = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  # Unary ops
  NEG = 4
  EXP = 5
  LOG = 6
  SIN = 7
  COS = 8

BINARY_OPS = frozenset({OpType.ADD, OpType.SUB, OpType.MUL, OpType.DIV})
UNARY_OPS = frozenset({OpType.NEG, OpType.EXP, OpType.LOG, OpType.SIN, OpType.COS})

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV}
UNARY_OP_MAP = {
    'neg': OpType.NEG, 'exp': OpType.EXP, 'log': OpType.LOG,
    'sin': OpType.SIN, 'cos': OpType.COS
}

# Text used by the printer; NEG is written as a bare prefix
OP_SYMBOLS = {
    OpType.ADD: '+', OpType.SUB: '-', OpType.MUL: '*', OpType.DIV: '/',
    OpType.NEG: '-', OpType.EXP: 'exp', OpType.LOG: 'log',
    OpType.SIN: 'sin', OpType.COS: 'cos'
}

# Same convention as C's %f
LITERAL_FORMAT = '{:.6f}'


def evaluate_binary_op(left_val: float, right_val: float, op_type: OpType) -> float:
  """Apply a binary operator with IEEE semantics (x/0 gives inf or nan, never raises)."""
  left_val = np.float64(left_val)
  right_val = np.float64(right_val)
  with np.errstate(all='ignore'):
    if op_type == OpType.ADD:
      result = left_val + right_val
    elif op_type == OpType.SUB:
      result = left_val - right_val
    elif op_type == OpType.MUL:
      result = left_val * right_val
    elif op_type == OpType.DIV:
      result = np.divide(left_val, right_val)
    else:
      return None
  return float(result)


def evaluate_unary_op(operand_val: float, op_type: OpType) -> float:
  """Apply a unary function with IEEE semantics (log(-1) gives nan, never raises)."""
  operand_val = np.float64(operand_val)
  with np.errstate(all='ignore'):
    if op_type == OpType.NEG:
      result = -operand_val
    elif op_type == OpType.EXP:
      result = np.exp(operand_val)
    elif op_type == OpType.LOG:
      result = np.log(operand_val)
    elif op_type == OpType.SIN:
      result = np.sin(operand_val)
    elif op_type == OpType.COS:
      result = np.cos(operand_val)
    else:
      return None
  return float(result)
