# scalar_tape/__init__.py
# Scalar reverse-mode autodiff engine and a small MLP built on it

from .autodiff import (
    Operation,
    Node,
    new_value,
    new_label_value,
    Tape,
    use_tape,
    topological_order,
    forward,
    backward,
    zero_gradients,
    grad,
    grads,
    grads_list,
    value,
    central_difference,
    bump_gradients,
    check_gradients,
    add, sub, mul, div, neg, pow,
    tanh, sigmoid, relu,
)
from .config import ScalarTapeConfig
from .nn import Neuron, Layer, MLP, squared_error

__version__ = "0.1.0"

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
    'central_difference',
    'bump_gradients',
    'check_gradients',
    # Ops
    'add', 'sub', 'mul', 'div', 'neg', 'pow',
    'tanh', 'sigmoid', 'relu',
    # Network
    'ScalarTapeConfig',
    'Neuron',
    'Layer',
    'MLP',
    'squared_error',
]
