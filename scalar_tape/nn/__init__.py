# nn/__init__.py
from .module import Neuron, Layer, MLP
from .losses import squared_error

__all__ = ["Neuron", "Layer", "MLP", "squared_error"]
