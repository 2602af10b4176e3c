"""Numeric routines shared by the forward and backward passes."""
from __future__ import annotations

import numpy as np


def weighted_sum(values: np.ndarray, weights: np.ndarray, bias: np.ndarray) -> np.ndarray:
    """Return ``bias[j] + sum_i values[i] * weights[i, j]`` for every unit ``j``."""

    return bias + values @ weights


def sigmoid(x: np.ndarray) -> np.ndarray:
    """Element-wise logistic function ``1 / (1 + exp(-x))``.

    Only ``exp(-|x|)`` is ever evaluated, so large inputs saturate to 0 or 1
    instead of overflowing.
    """

    x = np.asarray(x, dtype=np.float64)
    z = np.exp(-np.abs(x))
    return np.where(x >= 0.0, 1.0 / (1.0 + z), z / (1.0 + z))


def sigmoid_derivative(activated: np.ndarray) -> np.ndarray:
    """Derivative of the sigmoid given its *output* ``a = sigmoid(x)``.

    Uses ``sigmoid'(x) = a * (1 - a)``; callers pass activations, never raw sums.
    """

    return activated * (1.0 - activated)
