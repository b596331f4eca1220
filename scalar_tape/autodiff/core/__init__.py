# autodiff/core/__init__.py

"""
Core public API for the autodiff package.

Exports:
    Node              : One scalar vertex of the computation graph.
    Operation         : Closed enum of primitives (arity, value and gradient rules).
    new_value         : Create a leaf.
    new_label_value   : Create a labelled leaf.
    Tape, use_tape    : Optional recorder of created nodes.
    forward           : Recompute every value below a root, leaves first.
    backward          : Propagate gradients from a root to every ancestor.
    zero_gradients    : Reset gradients below a root.
    topological_order : Operands-first ordering of the graph below a root.
    grad, grads       : Convenience: gradients of a function at a point.
    value             : Convenience: numeric value of a Node.
"""

from .operation import Operation
from .node import Node, new_value, new_label_value
from .tape import Tape, use_tape
from .engine import topological_order, forward, backward, zero_gradients
from .seeds import grad, grads, grads_list, value

__all__ = [
    "Operation",
    "Node", "new_value", "new_label_value",
    "Tape", "use_tape",
    "topological_order", "forward", "backward", "zero_gradients",
    "grad", "grads", "grads_list", "value",
]
