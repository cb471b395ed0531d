"""Logging utilities."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "sentence_splitter"


def _package_logger() -> logging.Logger:
    """The package logger owns the only handler; it does not pass records to the root."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the package logger."""
    _package_logger()
    return logging.getLogger(name)


def set_level(level: str | int) -> None:
    """Set the level of every logger under the package."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")
    _package_logger().setLevel(level)
