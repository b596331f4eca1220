# autodiff/core/operation.py
from __future__ import annotations
from enum import Enum
from typing import Tuple
import numpy as np


def _sigmoid(x):
    # Split on sign so exp() never sees a large positive argument
    if x >= 0:
        return 1.0 / (1.0 + np.exp(-x))
    e = np.exp(x)
    return e / (1.0 + e)


def _relu(x):
    # NaN passes through
    return np.maximum(0.0, x)


def _d_relu(x):
    # relu'(0) is taken as 0
    return np.float64(1.0) if x > 0 else np.float64(0.0)


def _d_tanh(x):
    t = np.tanh(x)
    return 1.0 - t * t


def _d_sigmoid(x):
    s = _sigmoid(x)
    return s * (1.0 - s)


class Operation(Enum):
    """
    Closed set of primitives a Node can be derived by.

    Each member carries
        arity    : number of operands
        symbol   : short tag used by the diagnostic formatter
        evaluate : f(*operand_values) -> value
        partials : f(*operand_values) -> (∂out/∂operand_0, ...)

    Rules are evaluated under ``np.errstate(all="ignore")`` so domain errors
    (x/0, 0**-1, log of a non-positive base) come back as inf/NaN.
    """
    NONE = ("", 0)
    ADD = ("+", 2)
    MUL = ("*", 2)
    DIV = ("/", 2)
    POW = ("^", 2)
    TANH = ("tanh", 1)
    SIGMOID = ("sigmoid", 1)
    RELU = ("relu", 1)

    def __init__(self, symbol: str, arity: int):
        self.symbol = symbol
        self.arity = arity

    @property
    def is_leaf(self) -> bool:
        return self is Operation.NONE

    def evaluate(self, *values) -> np.float64:
        """Value rule: recompute the output from operand values."""
        self._check_arity(values)
        if self.is_leaf:
            raise ValueError("Operation.NONE has no value rule; leaves are set directly")
        values = _as_float64s(values)
        with np.errstate(all="ignore"):
            return np.float64(_VALUE_RULES[self](*values))

    def partials(self, *values) -> Tuple[np.float64, ...]:
        """Local gradient rule: ∂output/∂operand for each operand, in order."""
        self._check_arity(values)
        if self.is_leaf:
            return ()
        values = _as_float64s(values)
        with np.errstate(all="ignore"):
            return tuple(np.float64(d) for d in _GRADIENT_RULES[self](*values))

    def _check_arity(self, values):
        if len(values) != self.arity:
            raise ValueError(
                f"{self.name} takes {self.arity} operand(s), got {len(values)}"
            )


_VALUE_RULES: dict = {
    Operation.ADD: lambda a, b: a + b,
    Operation.MUL: lambda a, b: a * b,
    Operation.DIV: lambda a, b: a / b,
    Operation.POW: lambda a, b: np.power(a, b),
    Operation.TANH: np.tanh,
    Operation.SIGMOID: _sigmoid,
    Operation.RELU: _relu,
}

_GRADIENT_RULES: dict = {
    Operation.ADD: lambda a, b: (1.0, 1.0),
    Operation.MUL: lambda a, b: (b, a),
    Operation.DIV: lambda a, b: (1.0 / b, -a / np.square(b)),
    Operation.POW: lambda a, b: (b * np.power(a, b - 1.0), np.power(a, b) * np.log(a)),
    Operation.TANH: lambda a: (_d_tanh(a),),
    Operation.SIGMOID: lambda a: (_d_sigmoid(a),),
    Operation.RELU: lambda a: (_d_relu(a),),
}


def _as_float64s(values):
    # float64 arithmetic gives inf/NaN where Python floats would raise
    return tuple(np.float64(v) for v in values)
