import pytest

from scalar_tape import new_label_value


@pytest.fixture
def diamond():
    """d = a + b, e = d * c, f = e + d with a=1, b=2, c=3."""
    a = new_label_value(1.0, "a")
    b = new_label_value(2.0, "b")
    c = new_label_value(3.0, "c")
    d = a + b
    e = d * c
    f = e + d
    return dict(a=a, b=b, c=c, d=d, e=e, f=f)
