"""Single hidden layer feed-forward network trained with backpropagation.

The package is organised as:
- ``core``: the :class:`Network` itself and its activation routines,
- ``training``: an epoch-driven trainer around :meth:`Network.train_step`,
- ``tasks``: small datasets such as XOR,
- ``utils``: logging and plotting helpers.
"""

from .config import EarlyStoppingConfig, NetworkConfig, TrainingConfig
from .core import Network, sigmoid, sigmoid_derivative
from .errors import InvalidArgument

__all__ = [
    "EarlyStoppingConfig",
    "InvalidArgument",
    "Network",
    "NetworkConfig",
    "TrainingConfig",
    "sigmoid",
    "sigmoid_derivative",
]
