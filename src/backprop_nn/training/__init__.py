"""Training utilities for :class:`backprop_nn.core.Network`."""

from .trainer import Trainer, TrainingHistory, mean_squared_error

__all__ = ["Trainer", "TrainingHistory", "mean_squared_error"]
