"""Console logging setup for scripts built on the package."""
from __future__ import annotations

import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the ``backprop_nn`` logger and set its level.

    Calling this more than once replaces the level but keeps a single handler.
    """

    logger = logging.getLogger("backprop_nn")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(getattr(handler, "_backprop_nn", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._backprop_nn = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
