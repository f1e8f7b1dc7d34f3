"""Configure application logging using the Python standard library.

Log records go to stderr so they never interleave with the receipts and
shipment notices the CLI prints on stdout.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Attach a single stderr handler to the ``pos`` logger.

    Safe to call more than once; earlier handlers are replaced.
    """
    logger = logging.getLogger("pos")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
