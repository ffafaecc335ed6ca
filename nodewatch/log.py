"""Console logging for the ``nodewatch`` logger tree."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "nodewatch"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stdout handler to the ``nodewatch`` logger and set its level.

    Safe to call more than once; the handler is only added the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        )
        logger.addHandler(handler)
    return logger
