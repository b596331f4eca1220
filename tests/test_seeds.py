import math

import pytest

from scalar_tape import grad, grads, grads_list, new_value, tanh, value
from scalar_tape.autodiff.core import tape as tape_mod


def test_grad_single_input():
    assert grad(lambda x: x ** 3, 2.0) == pytest.approx(12.0)
    assert grad(lambda x: tanh(x), 0.5) == pytest.approx(1 - math.tanh(0.5) ** 2)


def test_grad_of_constant_function_is_zero():
    assert grad(lambda x: 5.0, 1.0) == 0.0


def test_grads_dict():
    out = grads(lambda v: v["a"] * v["b"] + v["a"], {"a": 2.0, "b": 3.0})
    assert list(out) == ["a", "b"]
    assert out["a"] == 4.0
    assert out["b"] == 2.0


def test_grads_list_example():
    assert grads_list(lambda xs: xs[0] * xs[0] + 3 * xs[1], [2.0, 4.0]) == [4.0, 3.0]


def test_grads_list_accepts_existing_nodes():
    x = new_value(1.5)
    (g,) = grads_list(lambda xs: xs[0] * 2, [x])
    assert g == 2.0
    assert x.gradient == 2.0


def test_helpers_do_not_leak_a_tape():
    grad(lambda x: x * x, 1.0)
    assert tape_mod.global_tape is None


def test_value():
    assert value(new_value(3.0)) == 3.0
    assert value(7) == 7
