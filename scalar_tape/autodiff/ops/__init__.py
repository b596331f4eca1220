# autodiff/ops/__init__.py

# Convenience re-exports so users can do: from scalar_tape.autodiff.ops import mul, tanh, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .activations import tanh, sigmoid, relu

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "tanh", "sigmoid", "relu",
]
