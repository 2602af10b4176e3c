"""The four-example XOR problem."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from ..core.network import Network

XOR_INPUTS: Tuple[Tuple[float, float], ...] = ((0.0, 0.0), (0.0, 1.0), (1.0, 0.0), (1.0, 1.0))
XOR_TARGETS: Tuple[Tuple[float], ...] = ((0.0,), (1.0,), (1.0,), (0.0,))


def make_xor_dataset() -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(inputs, targets)`` with shapes ``(4, 2)`` and ``(4, 1)``."""

    return np.array(XOR_INPUTS, dtype=np.float64), np.array(XOR_TARGETS, dtype=np.float64)


def xor_report(network: Network) -> List[Tuple[np.ndarray, np.ndarray]]:
    """Pair every XOR input with the network's prediction for it."""

    inputs, _ = make_xor_dataset()
    return [(row, network.predict(row)) for row in inputs]


__all__ = ["XOR_INPUTS", "XOR_TARGETS", "make_xor_dataset", "xor_report"]
