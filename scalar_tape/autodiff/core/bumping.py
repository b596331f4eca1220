"""
Finite-difference bumping

Reference gradients obtained by perturbing leaves and re-running the
forward pass, used to cross-check the backward pass.

Formula:
    ∂f/∂x ≈ [f(x+ε) - f(x-ε)] / (2ε)
"""

from typing import Callable, Sequence, Tuple
import numpy as np

from .node import Node
from .engine import forward, backward


def central_difference(f: Callable[[float], float], x: float, eps: float = 1e-6) -> float:
    """Central difference of a plain scalar function at x."""
    return (f(x + eps) - f(x - eps)) / (2.0 * eps)


def bump_gradients(root: Node, leaves: Sequence[Node], eps: float = 1e-6) -> np.ndarray:
    """
    Finite-difference gradient of `root` with respect to each leaf.

    Each leaf is bumped up and down in turn and the graph re-evaluated with
    `forward(root)`. Leaf values are restored and the graph re-evaluated at
    the original point before returning.

    Returns:
        np.ndarray of shape [len(leaves)], in the order of `leaves`.
    """
    for leaf in leaves:
        if not leaf.is_leaf:
            raise ValueError(f"can only bump leaves, got derived node {leaf}")

    out = np.zeros(len(leaves), dtype=float)
    for i, leaf in enumerate(leaves):
        x0 = leaf.value
        try:
            leaf.value = x0 + eps
            forward(root)
            v_up = root.value
            leaf.value = x0 - eps
            forward(root)
            v_down = root.value
        finally:
            leaf.value = x0
            forward(root)
        out[i] = (v_up - v_down) / (2.0 * eps)
    return out


def check_gradients(root: Node, leaves: Sequence[Node], eps: float = 1e-6,
                    rtol: float = 1e-4, atol: float = 1e-6) -> Tuple[bool, np.ndarray, np.ndarray]:
    """
    Compare backward-pass gradients against bumping.

    Returns:
        (ok, analytic, numeric) where `ok` is True when every component
        agrees within `rtol`/`atol`.
    """
    numeric = bump_gradients(root, leaves, eps)
    backward(root)
    analytic = np.array([float(leaf.gradient) for leaf in leaves], dtype=float)
    ok = bool(np.allclose(analytic, numeric, rtol=rtol, atol=atol))
    return ok, analytic, numeric
