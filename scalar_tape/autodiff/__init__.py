# autodiff/__init__.py
# Reverse-mode automatic differentiation over scalars

from .core.operation import Operation
from .core.node import Node, new_value, new_label_value
from .core.tape import Tape, use_tape
from .core.engine import (
    topological_order,
    forward,
    backward,
    zero_gradients,
)
from .core.seeds import grad, grads, grads_list, value
from .core.bumping import central_difference, bump_gradients, check_gradients
from .ops import add, sub, mul, div, neg, pow, tanh, sigmoid, relu

__all__ = [
    # Core
    'Operation',
    'Node',
    'new_value',
    'new_label_value',
    'Tape',
    'use_tape',
    # Engine
    'topological_order',
    'forward',
    'backward',
    'zero_gradients',
    # Helpers
    'grad',
    'grads',
    'grads_list',
    'value',
    # Bumping
    'central_difference',
    'bump_gradients',
    'check_gradients',
    # Ops
    'add', 'sub', 'mul', 'div', 'neg', 'pow',
    'tanh', 'sigmoid', 'relu',
]
