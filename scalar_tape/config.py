"""
scalar_tape configuration.

Initialization ranges, activation names and the demo's log level are set
here. No hardcoded values in the nn package.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

ACTIVATIONS = ("tanh", "sigmoid", "relu", "linear")


@dataclass
class ScalarTapeConfig:
    """Configuration for building networks on the scalar engine."""

    # Reproducibility: None draws fresh OS entropy
    seed: Optional[int] = None

    # Weights are drawn uniformly from [weight_low, weight_high)
    weight_low: float = -1.0
    weight_high: float = 1.0
    bias_init: float = 0.0

    # Hidden layers use `activation`; the last layer uses `output_activation`
    # (falls back to `activation` when None)
    activation: str = "tanh"
    output_activation: Optional[str] = None

    log_level: str = "WARNING"

    def __post_init__(self):
        if not self.weight_low < self.weight_high:
            raise ValueError(
                f"weight_low must be below weight_high, got [{self.weight_low}, {self.weight_high})"
            )
        for name in (self.activation, self.output_activation):
            if name is not None and name not in ACTIVATIONS:
                raise ValueError(f"Unknown activation {name!r}; expected one of {ACTIVATIONS}")
        if (not isinstance(self.log_level, str)
                or not isinstance(logging.getLevelName(self.log_level.upper()), int)):
            raise ValueError(f"Unknown log level {self.log_level!r}")

    @property
    def last_activation(self) -> str:
        return self.output_activation or self.activation

    def rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)
