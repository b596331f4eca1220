"""
Demo: build a few graphs, run forward and backward, print values and gradients.

    scalar-tape-demo --hidden 3 --seed 0
"""

import argparse
import logging
import sys

from scalar_tape.autodiff import (
    new_label_value, forward, backward, tanh, use_tape,
)
from scalar_tape.autodiff.core.graph_utils import print_graph_summary, print_computation_graph
from scalar_tape.autodiff.core.bumping import check_gradients
from scalar_tape.config import ACTIVATIONS, ScalarTapeConfig
from scalar_tape.nn import MLP

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Scalar reverse-mode autodiff demo',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--hidden', type=int, default=3,
                        help='Neurons in the hidden layer')
    parser.add_argument('--seed', type=int, default=0,
                        help='Seed for weight initialization')
    parser.add_argument('--activation', choices=ACTIVATIONS, default='tanh',
                        help='Hidden layer activation')
    parser.add_argument('--inputs', type=str, default='0.5,-1.0',
                        help='Comma-separated input vector')
    parser.add_argument('--targets', type=str, default='1.0',
                        help='Comma-separated target vector')
    parser.add_argument('--detailed', action='store_true',
                        help='Print every node of the loss graph')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        help='Logging level')
    return parser.parse_args(argv)


def parse_vector(text):
    """Parse '0.5,-1' into [0.5, -1.0]."""
    return [float(v) for v in text.split(',') if v.strip()]


def demo_chain():
    """tanh(a * b) with a=1, b=2."""
    print("tanh(a * b):")
    a = new_label_value(1.0, "a")
    b = new_label_value(2.0, "b")
    ab = a * b
    ab.label = "ab"
    out = tanh(ab)
    out.label = "out"
    forward(out)
    backward(out)
    print(f"  out = {float(out.value):.6f}")
    print(f"  a: grad = {float(a.gradient):.6f}")
    print(f"  b: grad = {float(b.gradient):.6f}")


def demo_diamond():
    """d = a + b, e = d * c, f = e + d; d feeds two consumers."""
    print("diamond f = (a + b) * c + (a + b):")
    a = new_label_value(1.0, "a")
    b = new_label_value(2.0, "b")
    c = new_label_value(3.0, "c")
    d = a + b
    d.label = "d"
    e = d * c
    e.label = "e"
    f = e + d
    f.label = "f"
    forward(f)
    backward(f)
    for node in (a, b, c, d, e, f):
        print(f"  {node.label}: value = {float(node.value):8.4f}  grad = {float(node.gradient):8.4f}")
    print_computation_graph(f)


def demo_mlp(args, config):
    inputs = parse_vector(args.inputs)
    targets = parse_vector(args.targets)

    with use_tape() as tape:
        net = MLP(len(inputs), [args.hidden, len(targets)], config)
        print(f"{net}:")
        print(f"  outputs = {net.predict(inputs)}")
        loss = net.loss(inputs, targets)
        backward(loss)
        print(f"  loss = {float(loss.value):.6f}")
        for i, p in enumerate(net.params()):
            print(f"  param {i:2d} {str(p):6s} value = {float(p.value):9.5f}  grad = {float(p.gradient):9.5f}")
        print(f"  nodes on tape: {len(tape)}")

    ok, _, _ = check_gradients(loss, net.params())
    print(f"  gradient check against bumping: {'ok' if ok else 'MISMATCH'}")
    print_graph_summary(loss, detailed=args.detailed)
    return ok


def main(argv=None):
    args = parse_args(argv)
    config = ScalarTapeConfig(seed=args.seed, activation=args.activation, log_level=args.log_level)
    logging.basicConfig(level=config.log_level.upper(),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    demo_chain()
    print()
    demo_diamond()
    logger.info("running with %s", config)
    ok = demo_mlp(args, config)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
