"""Epoch-driven training loop around :meth:`Network.train_step`."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np
from tqdm.auto import tqdm

from ..config import EarlyStoppingConfig, TrainingConfig
from ..core.network import Network
from ..errors import InvalidArgument

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TrainingHistory:
    """Losses recorded by :meth:`Trainer.fit`, one entry per evaluation."""

    epochs: List[int] = field(default_factory=list)
    losses: List[float] = field(default_factory=list)
    stopped_early: bool = False


def mean_squared_error(network: Network, inputs: np.ndarray, targets: np.ndarray) -> float:
    """Mean of ``(target - prediction)^2`` over every example and output unit."""

    predictions = np.array([network.predict(row) for row in inputs])
    diff = targets - predictions
    return float(np.mean(diff * diff))


class Trainer:
    """Feed every example to the network once per epoch, in the given order.

    The network itself neither shuffles nor counts epochs; both live here.
    """

    def __init__(self, network: Network, config: Optional[TrainingConfig] = None) -> None:
        self.network = network
        self.config = config or TrainingConfig()
        self.epoch = 0

    def _prepare(self, inputs: Sequence, targets: Sequence) -> Tuple[np.ndarray, np.ndarray]:
        try:
            raw_x, raw_y = np.asarray(inputs), np.asarray(targets)
            if raw_x.dtype.kind in "US" or raw_y.dtype.kind in "US":
                raise TypeError("inputs and targets hold text, not numbers")
            x = np.array(raw_x, dtype=np.float64)
            y = np.array(raw_y, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise InvalidArgument("inputs and targets must be rectangular arrays of numbers") from exc
        if x.ndim != 2 or y.ndim != 2:
            raise InvalidArgument("inputs and targets must be two-dimensional")
        if x.shape[0] == 0:
            raise InvalidArgument("at least one training example is required")
        if x.shape[0] != y.shape[0]:
            msg = f"got {x.shape[0]} inputs but {y.shape[0]} targets"
            raise InvalidArgument(msg)
        if x.shape[1] != self.network.input_size:
            raise InvalidArgument(f"inputs must have {self.network.input_size} columns, got {x.shape[1]}")
        if y.shape[1] != self.network.output_size:
            raise InvalidArgument(f"targets must have {self.network.output_size} columns, got {y.shape[1]}")
        return x, y

    def evaluate(self, inputs: Sequence, targets: Sequence) -> float:
        """Return the mean squared error of the network over a dataset."""

        x, y = self._prepare(inputs, targets)
        return mean_squared_error(self.network, x, y)

    def fit(self, inputs: Sequence, targets: Sequence) -> TrainingHistory:
        """Train for ``config.epochs`` epochs or until early stopping triggers."""

        x, y = self._prepare(inputs, targets)
        cfg = self.config
        stopping: Optional[EarlyStoppingConfig] = cfg.early_stopping
        history = TrainingHistory()
        best_loss = float("inf")
        evaluations_without_improvement = 0

        epochs = range(1, cfg.epochs + 1)
        if cfg.show_progress:
            epochs = tqdm(epochs, desc="Training", total=cfg.epochs)

        for epoch in epochs:
            self.epoch = epoch
            for row, target in zip(x, y):
                self.network.train_step(row, target)

            if epoch % cfg.log_every != 0 and epoch != cfg.epochs:
                continue

            loss = mean_squared_error(self.network, x, y)
            history.epochs.append(epoch)
            history.losses.append(loss)
            logger.info("epoch %d/%d, loss %.6f", epoch, cfg.epochs, loss)

            if stopping is None:
                continue
            if stopping.target_loss is not None and loss <= stopping.target_loss:
                logger.info("Target loss %.6f reached at epoch %d", stopping.target_loss, epoch)
                history.stopped_early = epoch != cfg.epochs
                break
            if loss + stopping.min_delta < best_loss:
                best_loss = loss
                evaluations_without_improvement = 0
            else:
                evaluations_without_improvement += 1
                if evaluations_without_improvement >= stopping.patience:
                    logger.info(
                        "No improvement in %d evaluations, stopping at epoch %d",
                        stopping.patience,
                        epoch,
                    )
                    history.stopped_early = epoch != cfg.epochs
                    break

        if isinstance(epochs, tqdm):
            epochs.close()
        return history


__all__ = ["Trainer", "TrainingHistory", "mean_squared_error"]
