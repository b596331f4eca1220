# autodiff/ops/arithmetic.py
from ..core.node import Node
from ..core.operation import Operation


def _as_node(x):
    """Ensure x is a Node; otherwise wrap it as a constant leaf."""
    return x if isinstance(x, Node) else Node(x)


def _apply(operation: Operation, *operands):
    """
    Generic primitive:
      - wraps plain numbers as constant leaves
      - computes out.value from the operands' current values
      - records the operands in call order
    """
    operands = tuple(_as_node(x) for x in operands)
    val = operation.evaluate(*(p.value for p in operands))
    return Node(val, operation, operands)


def add(x, y): return _apply(Operation.ADD, x, y)
def mul(x, y): return _apply(Operation.MUL, x, y)
def div(x, y): return _apply(Operation.DIV, x, y)


def pow(x, y):
    """
    Power:
      out.value = x ** y

    Local partials:
      ∂out/∂x = y * x^(y-1)
      ∂out/∂y = x^y * log(x)        (NaN/-inf for x <= 0)
    """
    return _apply(Operation.POW, x, y)


def neg(x):
    """-x, expressed as x * -1."""
    return mul(x, -1.0)


def sub(x, y):
    """x - y, expressed as x + (-y)."""
    return add(x, neg(y))
