"""Configuration dataclasses for the network and its trainer."""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from .errors import InvalidArgument


def check_positive_int(name: str, value: object) -> int:
    """Return ``value`` if it is a strictly positive integer."""

    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise InvalidArgument(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def check_learning_rate(value: object) -> float:
    """Return ``value`` as a float if it is positive and finite."""

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"learning_rate must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidArgument(f"learning_rate must be positive and finite, got {value!r}")
    return float(value)


def check_non_negative(name: str, value: object) -> float:
    """Return ``value`` as a float if it is a finite number >= 0."""

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidArgument(f"{name} must be non-negative and finite, got {value!r}")
    return float(value)


@dataclass(slots=True)
class NetworkConfig:
    """Configuration controlling network topology and the update rule.

    Parameters
    ----------
    input_size:
        Number of features in the input vector.
    hidden_size:
        Number of units in the single hidden layer.
    output_size:
        Number of sigmoid output units.
    learning_rate:
        Constant step size applied to every parameter update.
    seed:
        Optional seed for the generator that draws the initial parameters.
        Two networks built from the same seed start from identical weights.
    propagate_through_updated_weights:
        When ``True`` the hidden error is propagated through the hidden to
        output weights *after* they have been updated in the same step. The
        default propagates through the weights as they were before the step.
    """

    input_size: int
    hidden_size: int
    output_size: int
    learning_rate: float = 0.5
    seed: int | None = None
    propagate_through_updated_weights: bool = False

    def __post_init__(self) -> None:
        self.input_size = check_positive_int("input_size", self.input_size)
        self.hidden_size = check_positive_int("hidden_size", self.hidden_size)
        self.output_size = check_positive_int("output_size", self.output_size)
        self.learning_rate = check_learning_rate(self.learning_rate)


@dataclass(slots=True)
class EarlyStoppingConfig:
    """Configuration for optional early stopping during training.

    ``patience`` counts loss evaluations, not epochs; the trainer evaluates
    once every ``TrainingConfig.log_every`` epochs.
    """

    patience: int = 20
    min_delta: float = 1e-4
    target_loss: float | None = None

    def __post_init__(self) -> None:
        self.patience = check_positive_int("patience", self.patience)
        self.min_delta = check_non_negative("min_delta", self.min_delta)
        if self.target_loss is not None:
            self.target_loss = check_non_negative("target_loss", self.target_loss)


@dataclass(slots=True)
class TrainingConfig:
    """Settings for :class:`backprop_nn.training.Trainer`."""

    epochs: int = 10_000
    log_every: int = 1_000
    show_progress: bool = False
    early_stopping: EarlyStoppingConfig | None = None

    def __post_init__(self) -> None:
        self.epochs = check_positive_int("epochs", self.epochs)
        self.log_every = check_positive_int("log_every", self.log_every)
