"""Network parameters, forward inference and backpropagation."""

from .activation import sigmoid, sigmoid_derivative, weighted_sum
from .network import Network

__all__ = ["Network", "sigmoid", "sigmoid_derivative", "weighted_sum"]
