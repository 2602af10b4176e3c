"""Exceptions raised by the network and its configuration."""


class InvalidArgument(ValueError):
    """Raised for non-positive layer sizes, bad hyper-parameters or
    vectors whose length does not match the network topology.
    """
