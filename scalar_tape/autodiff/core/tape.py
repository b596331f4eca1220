# autodiff/core/tape.py
from __future__ import annotations
from typing import List, Optional
from contextlib import contextmanager


class Tape:
    """
    Records Nodes in creation order while it is the active tape.

    Creation order is a valid topological order: a node's operands always
    exist before the node itself.
    """
    def __init__(self):
        self.nodes: List = []

    def __len__(self):
        return len(self.nodes)

    def reset(self):
        self.nodes.clear()

    def push_node(self, node):
        """Append a node and return its position on the tape."""
        self.nodes.append(node)
        return len(self.nodes) - 1

    def leaves(self) -> List:
        return [n for n in self.nodes if n.is_leaf]

    def zero_gradients(self):
        """Set the gradient of every recorded node to zero."""
        for node in self.nodes:
            node._reset_gradient()


# No tape is active by default, so graphs are not kept alive by a registry.
global_tape: Optional[Tape] = None


def record(node):
    """Push `node` onto the active tape, if there is one."""
    if global_tape is not None:
        global_tape.push_node(node)


@contextmanager
def use_tape(tape: Optional[Tape] = None):
    """
    Context manager to temporarily record onto a tape:
        with use_tape() as tape:
            ... build computation ...
            backward(y)
    """
    from . import tape as _tape_mod  # module access so record() sees the swap
    prev = _tape_mod.global_tape
    try:
        _tape_mod.global_tape = tape if tape is not None else Tape()
        yield _tape_mod.global_tape
    finally:
        _tape_mod.global_tape = prev
