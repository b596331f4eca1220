# autodiff/core/engine.py
from __future__ import annotations
import logging
from typing import List

from .node import Node

logger = logging.getLogger(__name__)


def topological_order(root: Node) -> List[Node]:
    """
    Every node reachable from `root`, each exactly once, operands before the
    nodes that consume them. `root` is always last.

    Post-order depth-first traversal with an explicit stack, so long chains
    do not run into the interpreter's recursion limit.
    """
    if not isinstance(root, Node):
        raise TypeError(f"expected a Node, got {type(root)}")
    order: List[Node] = []
    visited = set()
    # (node, expanded): a node is emitted the second time it is popped
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if id(node) in visited:
            continue
        visited.add(id(node))
        stack.append((node, True))
        # reversed so operands are emitted in call order
        for p in reversed(node.operands):
            if id(p) not in visited:
                stack.append((p, False))
    return order


def forward(root: Node) -> None:
    """
    Recompute the value of every node reachable from `root`, leaves first.
    Leaves keep their caller-supplied values.
    """
    order = topological_order(root)
    for node in order:
        if not node.is_leaf:
            node._recompute()
    logger.debug("forward: evaluated %d nodes", len(order))


def zero_gradients(root: Node) -> None:
    """Set the gradient of every node reachable from `root` to zero."""
    for node in topological_order(root):
        node._reset_gradient()


def backward(root: Node, seed=1.0) -> None:
    """
    Run a single reverse pass from `root`.

    Args:
        root: the scalar every gradient is taken with respect to.
        seed: initial ∂root/∂root, 1.0 unless scaling the whole pass.

    Notes:
        - All gradients in the subgraph are zeroed first, so repeated calls
          never accumulate into each other.
        - Nodes are processed in reverse topological order: a node's gradient
          is complete (every consumer has contributed) before it propagates.
        - For each edge we accumulate: p.gradient += node.gradient * ∂node/∂p.
        - Every edge accumulates, even behind a zero gradient, so an inf/NaN
          local partial still shows up as a non-finite gradient.
    """
    order = topological_order(root)
    for node in order:
        node._reset_gradient()
    root._accumulate(seed)

    for node in reversed(order):
        if node.is_leaf:
            continue
        g = node.gradient
        for p, local_partial in zip(node.operands, node.local_gradients()):
            p._accumulate(g * local_partial)
    logger.debug("backward: propagated through %d nodes", len(order))
