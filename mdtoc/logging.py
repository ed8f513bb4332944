"""Logging utilities for mdtoc commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "mdtoc"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the mdtoc hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def verbosity_level(verbosity: int) -> int:
    """Map a repeated ``-v`` count to a logging level."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(*, verbosity: int = 0, log_file: Path | None = None) -> logging.Logger:
    """Configure the mdtoc logger with stderr output and an optional file sink."""
    level = verbosity_level(verbosity)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-5s [%(name)s] %(message)s")
    )
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    logger.debug("verbosity=%d", verbosity)
    return logger


__all__ = ["configure_logging", "get_logger", "verbosity_level"]
