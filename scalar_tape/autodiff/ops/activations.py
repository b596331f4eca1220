# autodiff/ops/activations.py
from ..core.operation import Operation
from .arithmetic import _apply


def tanh(x):
    """Hyperbolic tangent; ∂/∂x = 1 - tanh(x)^2."""
    return _apply(Operation.TANH, x)


def sigmoid(x):
    """Logistic sigmoid 1/(1+e^-x); ∂/∂x = s(1-s)."""
    return _apply(Operation.SIGMOID, x)


def relu(x):
    """max(0, x); ∂/∂x = 1 for x > 0, else 0 (including x == 0)."""
    return _apply(Operation.RELU, x)
