"""Logging setup shared by the API and the uvicorn entrypoints."""

from __future__ import annotations

import logging

LOGGER_NAME = "roster_backend"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the package logger once and set its level."""

    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


__all__ = ["LOGGER_NAME", "configure_logging"]
