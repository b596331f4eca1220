# autodiff/core/node.py
from __future__ import annotations
import numbers
import numpy as np
from typing import Optional, Tuple

from .operation import Operation
from . import tape as tape_mod  # module access for use_tape() compatibility


class Node:
    """
    One scalar vertex of the computation graph.

    Attributes
    ----------
    value : np.float64
        Current value. Leaves are set by the caller; derived nodes are
        computed from their operands at construction and by `forward`.
    gradient : np.float64
        ∂(root)/∂(this node) for the most recent `backward(root)` that
        reached this node. Read-only outside the engine.
    operation : Operation
        How `value` is derived from `operands`. `Operation.NONE` for leaves.
    operands : tuple[Node, ...]
        Inputs in call order. Shared freely between parents.
    label : Optional[str]
        Debug name, no computational effect.
    """

    __slots__ = ("_value", "_gradient", "_operation", "_operands", "label")

    def __init__(self, value, operation: Operation = Operation.NONE,
                 operands: Tuple["Node", ...] = (), label: Optional[str] = None):
        operands = tuple(operands)
        if len(operands) != operation.arity:
            raise ValueError(
                f"{operation.name} expects {operation.arity} operand(s), got {len(operands)}"
            )
        for op in operands:
            if not isinstance(op, Node):
                raise TypeError(f"operands must be Node instances, got {type(op)}")
        self._value = _as_float64(value)
        self._gradient = np.float64(0.0)
        self._operation = operation
        self._operands = operands
        self.label = label
        tape_mod.record(self)

    @property
    def value(self) -> np.float64:
        return self._value

    @value.setter
    def value(self, v):
        if not self.is_leaf:
            raise AttributeError(
                f"cannot assign value of derived node {self}; assign its leaves and call forward()"
            )
        self._value = _as_float64(v)

    @property
    def gradient(self) -> np.float64:
        return self._gradient

    @property
    def operation(self) -> Operation:
        return self._operation

    @property
    def operands(self) -> Tuple["Node", ...]:
        return self._operands

    @property
    def is_leaf(self) -> bool:
        return self._operation.is_leaf

    # ---- engine hooks ----
    def _recompute(self):
        self._value = self._operation.evaluate(*(p._value for p in self._operands))

    def _reset_gradient(self):
        self._gradient = np.float64(0.0)

    def _accumulate(self, delta):
        self._gradient = self._gradient + delta

    def local_gradients(self) -> Tuple[np.float64, ...]:
        """∂value/∂operand for each operand at the operands' current values."""
        return self._operation.partials(*(p._value for p in self._operands))

    def describe(self) -> str:
        return f"{self.label or ''}({self._operation.symbol})"

    def __str__(self):
        return self.describe()

    def __repr__(self):
        return (f"Node({self._value!r}, op={self._operation.name}, "
                f"grad={self._gradient!r}, label={self.label!r})")

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import pow
        return pow(other, self)

    def tanh(self):
        from ..ops.activations import tanh
        return tanh(self)

    def sigmoid(self):
        from ..ops.activations import sigmoid
        return sigmoid(self)

    def relu(self):
        from ..ops.activations import relu
        return relu(self)


def _as_float64(v) -> np.float64:
    # bool is a numbers.Real too; reject it along with strings and containers
    if isinstance(v, bool) or not isinstance(v, numbers.Real):
        raise TypeError(f"Node only accepts real scalars, but got {type(v)}")
    return np.float64(v)


def new_value(data) -> Node:
    """Create a leaf with the given value."""
    return Node(data)


def new_label_value(data, label: str) -> Node:
    """Create a labelled leaf."""
    return Node(data, label=label)
