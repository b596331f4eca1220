# nn/module.py
"""
Neuron / Layer / MLP built on the scalar engine.

Every weight and bias is a leaf Node. `run` builds a fresh expression graph
per call over those shared leaves, so one backward pass from a loss reaches
every parameter.
"""
from __future__ import annotations
import logging
from typing import List, Optional, Sequence

import numpy as np

from ..autodiff.core.node import Node, new_label_value
from ..autodiff.core.engine import forward
from ..autodiff.ops import add, mul, tanh, sigmoid, relu
from ..config import ScalarTapeConfig
from .losses import squared_error

logger = logging.getLogger(__name__)

_ACTIVATIONS = {
    "tanh": tanh,
    "sigmoid": sigmoid,
    "relu": relu,
    "linear": None,
}


def _as_input(x, i: int) -> Node:
    return x if isinstance(x, Node) else new_label_value(x, f"x{i}")


class Neuron:
    """
    activation(sum_i w_i * x_i + b)

    Args:
        n_inputs: number of inputs (and weights)
        activation: "tanh", "sigmoid", "relu" or "linear"
        rng: source of the initial weights
        weight_low, weight_high: weights are drawn uniformly from [low, high)
        bias_init: initial bias value
    """

    def __init__(self, n_inputs: int, activation: str = "tanh",
                 rng: Optional[np.random.Generator] = None,
                 weight_low: float = -1.0, weight_high: float = 1.0, bias_init: float = 0.0):
        if n_inputs < 1:
            raise ValueError(f"Neuron needs at least one input, got {n_inputs}")
        if activation not in _ACTIVATIONS:
            raise ValueError(f"Unknown activation {activation!r}; expected one of {tuple(_ACTIVATIONS)}")
        rng = rng if rng is not None else np.random.default_rng()
        init = rng.uniform(weight_low, weight_high, size=n_inputs)
        self.weights: List[Node] = [new_label_value(float(w), f"w{i}") for i, w in enumerate(init)]
        self.bias: Node = new_label_value(bias_init, "b")
        self.activation = activation

    @property
    def n_inputs(self) -> int:
        return len(self.weights)

    def run(self, inputs: Sequence) -> Node:
        if len(inputs) != self.n_inputs:
            raise ValueError(f"Neuron expects {self.n_inputs} inputs, got {len(inputs)}")
        total = None
        for i, (w, x) in enumerate(zip(self.weights, inputs)):
            term = mul(w, _as_input(x, i))
            total = term if total is None else add(total, term)
        out = add(total, self.bias)
        act = _ACTIVATIONS[self.activation]
        return out if act is None else act(out)

    __call__ = run

    def params(self) -> List[Node]:
        return self.weights + [self.bias]

    def __repr__(self):
        return f"Neuron({self.n_inputs}, activation={self.activation!r})"


class Layer:
    """`n_outputs` neurons over the same `n_inputs` inputs."""

    def __init__(self, n_inputs: int, n_outputs: int, activation: str = "tanh",
                 rng: Optional[np.random.Generator] = None, **init):
        if n_outputs < 1:
            raise ValueError(f"Layer needs at least one neuron, got {n_outputs}")
        rng = rng if rng is not None else np.random.default_rng()
        self.neurons = [Neuron(n_inputs, activation, rng, **init) for _ in range(n_outputs)]

    @property
    def n_inputs(self) -> int:
        return self.neurons[0].n_inputs

    @property
    def n_outputs(self) -> int:
        return len(self.neurons)

    def run(self, inputs: Sequence) -> List[Node]:
        # Wrap once so every neuron shares the same input leaves
        inputs = [_as_input(x, i) for i, x in enumerate(inputs)]
        return [n.run(inputs) for n in self.neurons]

    __call__ = run

    def params(self) -> List[Node]:
        return [p for n in self.neurons for p in n.params()]

    def __repr__(self):
        return f"Layer({self.n_inputs} -> {self.n_outputs}, activation={self.neurons[0].activation!r})"


class MLP:
    """
    Feed-forward network.

    Args:
        n_inputs: width of the input vector
        layer_sizes: number of neurons per layer, last entry is the output width
        config: activations, init range and seed (defaults to ScalarTapeConfig())
        rng: overrides `config.seed` when given

    Example:
        net = MLP(2, [3, 1], ScalarTapeConfig(seed=0))
        loss = net.loss([0.5, -1.0], [1.0])
        backward(loss)
        grads = [p.gradient for p in net.params()]
    """

    def __init__(self, n_inputs: int, layer_sizes: Sequence[int],
                 config: Optional[ScalarTapeConfig] = None,
                 rng: Optional[np.random.Generator] = None):
        if not layer_sizes:
            raise ValueError("MLP needs at least one layer")
        self.config = config if config is not None else ScalarTapeConfig()
        rng = rng if rng is not None else self.config.rng()
        init = dict(weight_low=self.config.weight_low, weight_high=self.config.weight_high,
                    bias_init=self.config.bias_init)

        sizes = [n_inputs] + list(layer_sizes)
        self.layers: List[Layer] = []
        for i in range(len(layer_sizes)):
            is_last = i == len(layer_sizes) - 1
            act = self.config.last_activation if is_last else self.config.activation
            self.layers.append(Layer(sizes[i], sizes[i + 1], act, rng, **init))
        logger.debug("built %r with %d parameters", self, len(self.params()))

    @property
    def n_inputs(self) -> int:
        return self.layers[0].n_inputs

    @property
    def n_outputs(self) -> int:
        return self.layers[-1].n_outputs

    def run(self, inputs: Sequence) -> List[Node]:
        """Output nodes for `inputs`; each layer's outputs feed the next."""
        x = inputs
        for layer in self.layers:
            x = layer.run(x)
        return x

    __call__ = run

    def predict(self, inputs: Sequence) -> List[float]:
        """Numeric outputs for `inputs`."""
        outs = self.run(inputs)
        for o in outs:
            forward(o)
        return [float(o.value) for o in outs]

    def loss(self, inputs: Sequence, targets: Sequence[float]) -> Node:
        """Sum of squared differences between run(inputs) and targets, as a Node."""
        return squared_error(self.run(inputs), targets)

    def params(self) -> List[Node]:
        return [p for layer in self.layers for p in layer.params()]

    def __repr__(self):
        sizes = " -> ".join(str(s) for s in [self.n_inputs] + [l.n_outputs for l in self.layers])
        return f"MLP({sizes})"
