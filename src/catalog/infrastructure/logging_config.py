"""Logging configuration for the catalog CLI."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Configure the root logger once per process.

    Unknown level names fall back to WARNING.
    """
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int) or isinstance(log_level, bool):
        log_level = logging.WARNING
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger("catalog").setLevel(log_level)
