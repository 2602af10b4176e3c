"""Feed-forward network with one sigmoid hidden layer and online backpropagation."""
from __future__ import annotations

import logging
import threading
from typing import Dict, Optional, Protocol, Sequence, Tuple, Union

import numpy as np

from ..config import NetworkConfig, check_learning_rate, check_positive_int
from ..errors import InvalidArgument
from .activation import sigmoid, sigmoid_derivative, weighted_sum

logger = logging.getLogger(__name__)

Vector = Union[Sequence[float], np.ndarray]


class UniformSource(Protocol):
    """Anything exposing :meth:`numpy.random.Generator.uniform`."""

    def uniform(self, low: float, high: float, size: Tuple[int, ...]) -> np.ndarray:
        ...


class Network:
    """Input (R^n) => sigmoid hidden (R^h) => sigmoid output (R^m).

    params: weights_input_hidden[i, j], weight from input i to hidden unit j.
            hidden_bias[j], bias into hidden unit j.
            weights_hidden_output[j, k], weight from hidden unit j to output k.
            output_bias[k], bias into output unit k.

    Every parameter is drawn uniformly from [-1, 1) at construction and then
    only changes through :meth:`train_step`, which applies one step of
    stochastic gradient descent on the squared error of a single example.
    """

    def __init__(
        self,
        input_size: int,
        hidden_size: int,
        output_size: int,
        *,
        learning_rate: float = 0.5,
        rng: Optional[UniformSource] = None,
        propagate_through_updated_weights: bool = False,
    ) -> None:
        """
        Parameters
        ----------
        input_size, hidden_size, output_size: int
            Layer widths. Each must be a positive integer.

        learning_rate: float, default=0.5
            Constant step size for every update.

        rng: generator, default=None
            Source of the initial parameters; ``rng.uniform(-1.0, 1.0, size)``
            is called once per parameter array. A fresh
            ``numpy.random.default_rng()`` is used when omitted.

        propagate_through_updated_weights: bool, default=False
            Propagate the output error through the hidden to output weights
            after they were updated in the same step instead of before.
        """
        self.input_size = check_positive_int("input_size", input_size)
        self.hidden_size = check_positive_int("hidden_size", hidden_size)
        self.output_size = check_positive_int("output_size", output_size)
        self.learning_rate = check_learning_rate(learning_rate)
        self.propagate_through_updated_weights = bool(propagate_through_updated_weights)

        rng = np.random.default_rng() if rng is None else rng
        self._weights_input_hidden = self._draw(rng, (self.input_size, self.hidden_size))
        self._weights_hidden_output = self._draw(rng, (self.hidden_size, self.output_size))
        self._hidden_bias = self._draw(rng, (self.hidden_size,))
        self._output_bias = self._draw(rng, (self.output_size,))

        self._lock = threading.Lock()
        logger.debug("Initialised %r", self)

    def __getstate__(self) -> Dict[str, object]:
        state = self.__dict__.copy()
        del state["_lock"]
        return state

    def __setstate__(self, state: Dict[str, object]) -> None:
        self.__dict__.update(state)
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: NetworkConfig, *, rng: Optional[UniformSource] = None) -> "Network":
        """Build a network from ``config``, seeding a generator from ``config.seed``."""

        if rng is None:
            rng = np.random.default_rng(config.seed)
        return cls(
            config.input_size,
            config.hidden_size,
            config.output_size,
            learning_rate=config.learning_rate,
            rng=rng,
            propagate_through_updated_weights=config.propagate_through_updated_weights,
        )

    def __repr__(self) -> str:
        return (
            f"<Network input_size={self.input_size}, hidden_size={self.hidden_size}, "
            f"output_size={self.output_size}, learning_rate={self.learning_rate}>"
        )

    @staticmethod
    def _draw(rng: UniformSource, shape: Tuple[int, ...]) -> np.ndarray:
        values = np.array(rng.uniform(-1.0, 1.0, size=shape), dtype=np.float64)
        return values.reshape(shape)

    @staticmethod
    def _as_vector(values: Vector, size: int, name: str) -> np.ndarray:
        try:
            raw = np.asarray(values)
            if raw.dtype.kind in "US":
                raise TypeError(f"{name} holds text, not numbers")
            vector = np.array(raw, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"{name} must be a vector of numbers") from exc
        if vector.ndim != 1 or vector.shape[0] != size:
            raise InvalidArgument(f"{name} must have length {size}, got shape {vector.shape}")
        return vector

    def _forward(self, inputs: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        hidden = sigmoid(weighted_sum(inputs, self._weights_input_hidden, self._hidden_bias))
        output = sigmoid(weighted_sum(hidden, self._weights_hidden_output, self._output_bias))
        return hidden, output

    def predict(self, inputs: Vector) -> np.ndarray:
        """
        Parameters
        ----------
        inputs: array-like, shape=(input_size,)

        Returns
        -------
        output: ndarray, shape=(output_size,)
            Sigmoid activations of the output layer. Network state is not
            modified.
        """
        inputs = self._as_vector(inputs, self.input_size, "inputs")
        _, output = self._forward(inputs)
        return output

    def train_step(self, inputs: Vector, targets: Vector) -> None:
        """Run a forward pass on ``inputs`` and update every parameter in place.

        Both vectors are validated before anything is touched, so a rejected
        call leaves the parameters unchanged.
        """
        inputs = self._as_vector(inputs, self.input_size, "inputs")
        targets = self._as_vector(targets, self.output_size, "targets")
        rate = self.learning_rate

        with self._lock:
            hidden, output = self._forward(inputs)

            output_error = targets - output
            output_delta = output_error * sigmoid_derivative(output)

            # Aliasing the live array makes the propagation below see the
            # in-place update of the output layer.
            if self.propagate_through_updated_weights:
                propagation_weights = self._weights_hidden_output
            else:
                propagation_weights = self._weights_hidden_output.copy()

            self._output_bias += rate * output_delta
            self._weights_hidden_output += rate * np.outer(hidden, output_delta)

            hidden_error = propagation_weights @ output_error
            hidden_delta = hidden_error * sigmoid_derivative(hidden)

            self._hidden_bias += rate * hidden_delta
            self._weights_input_hidden += rate * np.outer(inputs, hidden_delta)

    @property
    def weights_input_hidden(self) -> np.ndarray:
        return self._weights_input_hidden.copy()

    @property
    def weights_hidden_output(self) -> np.ndarray:
        return self._weights_hidden_output.copy()

    @property
    def hidden_bias(self) -> np.ndarray:
        return self._hidden_bias.copy()

    @property
    def output_bias(self) -> np.ndarray:
        return self._output_bias.copy()

    def parameters(self) -> Dict[str, np.ndarray]:
        """Return copies of all parameters keyed by name."""

        return {
            "weights_input_hidden": self.weights_input_hidden,
            "weights_hidden_output": self.weights_hidden_output,
            "hidden_bias": self.hidden_bias,
            "output_bias": self.output_bias,
        }
