# autodiff/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List
import numpy as np

from .node import Node
from .tape import use_tape
from .engine import backward


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def _ensure_node(v: Any, *, name: str) -> Node:
    """Wrap a plain value as a labelled leaf if needed; otherwise return the Node itself."""
    return v if isinstance(v, Node) else Node(v, label=name)


def _seed(y: Any) -> bool:
    # A non-Node result does not depend on the inputs: every gradient is 0
    if not isinstance(y, Node):
        return False
    backward(y, seed=1.0)
    return True


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Node], x0) -> np.float64:
    """
    Derivative of a scalar function y=f(x) at x0.
    Runs one backward pass on a fresh, isolated tape.
    """
    with use_tape():
        x = _ensure_node(x0, name="x")
        if not _seed(f(x)):
            return np.float64(0.0)
        return x.gradient


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Node],
          inputs: Dict[str, Any]) -> Dict[str, np.float64]:
    """
    Gradient of a scalar function y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE backward pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a Node
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: float64}  # gradients in the same key order as `inputs`
    """
    with use_tape():
        nodes = {k: _ensure_node(v, name=k) for k, v in inputs.items()}
        if not _seed(f(nodes)):
            return {k: np.float64(0.0) for k in inputs}
        return {k: nodes[k].gradient for k in inputs}


def grads_list(f: Callable[[List[Node]], Node],
               x0_list: Iterable[Any]) -> List[np.float64]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    with use_tape():
        xs = [_ensure_node(v, name=f"x{i}") for i, v in enumerate(x0_list)]
        if not _seed(f(xs)):
            return [np.float64(0.0) for _ in xs]
        return [x.gradient for x in xs]
