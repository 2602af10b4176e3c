"""Plotting utilities for training curves."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt

from ..training.trainer import TrainingHistory


def plot_loss_history(history: TrainingHistory, path: Optional[Union[str, Path]] = None):
    """Plot mean squared error against epoch, saving to ``path`` if given."""

    fig = plt.figure()
    plt.plot(history.epochs, history.losses, marker="o")
    plt.xlabel("Epoch")
    plt.ylabel("Mean squared error")
    plt.title("Training Loss")
    plt.tight_layout()
    if path is not None:
        fig.savefig(path)
    return fig
