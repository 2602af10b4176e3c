"""Datasets for exercising the network."""

from .xor import XOR_INPUTS, XOR_TARGETS, make_xor_dataset, xor_report

__all__ = ["XOR_INPUTS", "XOR_TARGETS", "make_xor_dataset", "xor_report"]
