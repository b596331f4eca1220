import math

import numpy as np
import pytest

from scalar_tape import (
    Operation, ScalarTapeConfig, backward, check_gradients, forward, new_value,
)
from scalar_tape.nn import MLP, Layer, Neuron, squared_error


def _net(seed=0, **kwargs):
    return MLP(2, [3, 1], ScalarTapeConfig(seed=seed, **kwargs))


# ----------------------------- Neuron ----------------------------- #
def test_neuron_initialization():
    n = Neuron(4, rng=np.random.default_rng(0))
    assert n.n_inputs == 4
    assert len(n.params()) == 5
    assert all(-1.0 <= w.value < 1.0 for w in n.weights)
    assert n.bias.value == 0.0
    assert all(p.is_leaf for p in n.params())


def test_neuron_run_builds_weighted_sum():
    n = Neuron(2, activation="linear", rng=np.random.default_rng(0))
    n.weights[0].value = 0.5
    n.weights[1].value = -1.0
    n.bias.value = 0.25
    out = n.run([2.0, 3.0])
    assert out.operation is Operation.ADD
    assert out.operands[1] is n.bias
    assert out.value == pytest.approx(-1.75)


@pytest.mark.parametrize("name, op", [("tanh", Operation.TANH),
                                      ("sigmoid", Operation.SIGMOID),
                                      ("relu", Operation.RELU)])
def test_neuron_activation(name, op):
    n = Neuron(3, activation=name, rng=np.random.default_rng(1))
    assert n.run([0.1, 0.2, 0.3]).operation is op


def test_neuron_accepts_nodes_as_inputs():
    n = Neuron(2, rng=np.random.default_rng(0))
    x = new_value(0.5)
    out = n([x, 1.0])
    backward(out)
    assert x.gradient != 0.0


def test_neuron_rejects_bad_arguments():
    with pytest.raises(ValueError):
        Neuron(0)
    with pytest.raises(ValueError):
        Neuron(2, activation="softmax")
    with pytest.raises(ValueError):
        Neuron(2, rng=np.random.default_rng(0)).run([1.0])


def test_neuron_custom_init_range():
    n = Neuron(50, rng=np.random.default_rng(3), weight_low=0.0, weight_high=0.1, bias_init=0.5)
    assert all(0.0 <= w.value < 0.1 for w in n.weights)
    assert n.bias.value == 0.5


# ----------------------------- Layer ----------------------------- #
def test_layer_run():
    layer = Layer(2, 3, rng=np.random.default_rng(0))
    assert layer.n_inputs == 2 and layer.n_outputs == 3
    outs = layer.run([0.5, -0.5])
    assert len(outs) == 3
    assert len(layer.params()) == 9


def test_layer_shares_input_leaves_between_neurons():
    layer = Layer(2, 3, activation="linear", rng=np.random.default_rng(0))
    outs = layer.run([0.5, -0.5])
    first_inputs = {id(o.operands[0].operands[0].operands[1]) for o in outs}
    assert len(first_inputs) == 1


# ----------------------------- MLP ----------------------------- #
def test_mlp_shape_and_params():
    net = _net()
    assert net.n_inputs == 2 and net.n_outputs == 1
    assert len(net.layers) == 2
    assert len(net.params()) == 3 * (2 + 1) + 1 * (3 + 1)
    assert repr(net) == "MLP(2 -> 3 -> 1)"


def test_mlp_params_are_ordered_by_layer_then_neuron():
    net = _net()
    first = net.layers[0].neurons[0]
    assert net.params()[:3] == first.weights + [first.bias]
    assert net.params()[-1] is net.layers[-1].neurons[0].bias


def test_mlp_is_deterministic_for_a_seed():
    x = [0.5, -1.0]
    a, b = _net(seed=7), _net(seed=7)
    assert a.predict(x) == b.predict(x)
    assert float(a.loss(x, [1.0]).value) == float(b.loss(x, [1.0]).value)
    assert [p.value for p in a.params()] == [p.value for p in b.params()]
    assert _net(seed=8).predict(x) != a.predict(x)


def test_mlp_rng_overrides_seed():
    x = [0.5, -1.0]
    a = MLP(2, [3, 1], ScalarTapeConfig(seed=1), rng=np.random.default_rng(99))
    b = MLP(2, [3, 1], ScalarTapeConfig(seed=2), rng=np.random.default_rng(99))
    assert a.predict(x) == b.predict(x)


def test_mlp_run_threads_layers():
    net = MLP(2, [3, 2], ScalarTapeConfig(seed=0, activation="linear"))
    x = [0.3, 0.7]
    hidden = [sum(w.value * xi for w, xi in zip(n.weights, x)) + n.bias.value
              for n in net.layers[0].neurons]
    expected = [sum(w.value * h for w, h in zip(n.weights, hidden)) + n.bias.value
                for n in net.layers[1].neurons]
    assert net.predict(x) == pytest.approx(expected)


def test_mlp_output_activation():
    net = MLP(2, [4, 1], ScalarTapeConfig(seed=0, activation="relu", output_activation="sigmoid"))
    assert net.layers[0].neurons[0].activation == "relu"
    assert net.layers[1].neurons[0].activation == "sigmoid"
    assert 0.0 < net.predict([1.0, 2.0])[0] < 1.0


def test_mlp_loss_is_squared_error():
    net = _net()
    x, t = [0.5, -1.0], [1.0]
    pred = net.predict(x)[0]
    loss = net.loss(x, t)
    assert loss.value == pytest.approx((pred - 1.0) ** 2)


def test_mlp_loss_gradients_reach_every_parameter():
    net = _net()
    loss = net.loss([0.5, -1.0], [1.0])
    backward(loss)
    grads = [p.gradient for p in net.params()]
    assert len(grads) == 13
    assert all(np.isfinite(g) for g in grads)
    assert any(g != 0.0 for g in grads)


def test_mlp_loss_gradients_match_bumping():
    net = _net(seed=3)
    loss = net.loss([0.5, -1.0], [1.0])
    ok, analytic, numeric = check_gradients(loss, net.params())
    assert ok, (analytic, numeric)


def test_forward_after_parameter_change():
    net = _net()
    out = net.run([0.5, -1.0])[0]
    before = out.value
    net.layers[-1].neurons[0].bias.value = 10.0
    forward(out)
    assert out.value != before
    assert out.value == pytest.approx(math.tanh(math.atanh(before) + 10.0))


def test_mlp_rejects_bad_shapes():
    with pytest.raises(ValueError):
        MLP(2, [])
    net = _net()
    with pytest.raises(ValueError):
        net.run([1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        net.loss([1.0, 2.0], [1.0, 2.0])


# ----------------------------- loss ----------------------------- #
def test_squared_error():
    preds = [new_value(1.0), new_value(-2.0)]
    loss = squared_error(preds, [0.5, 1.0])
    assert loss.value == pytest.approx(0.25 + 9.0)
    backward(loss)
    assert preds[0].gradient == pytest.approx(1.0)
    assert preds[1].gradient == pytest.approx(-6.0)


def test_squared_error_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        squared_error([new_value(1.0)], [1.0, 2.0])
    with pytest.raises(ValueError):
        squared_error([], [])
