# nn/losses.py
from typing import Sequence

from ..autodiff.core.node import Node, new_label_value
from ..autodiff.ops import add, mul


def squared_error(predictions: Sequence[Node], targets: Sequence[float]) -> Node:
    """
    sum_i (prediction_i - target_i)^2 as a single Node.

    Targets are constants; the difference is built as prediction + (-target)
    and squared with a product, so no Pow (and no log of a negative base)
    appears in the graph.
    """
    if len(predictions) != len(targets):
        raise ValueError(
            f"got {len(predictions)} predictions but {len(targets)} targets"
        )
    if not predictions:
        raise ValueError("squared_error needs at least one prediction")
    total = None
    for i, (p, t) in enumerate(zip(predictions, targets)):
        diff = add(p, new_label_value(-float(t), f"-y{i}"))
        sq = mul(diff, diff)
        total = sq if total is None else add(total, sq)
    return total
