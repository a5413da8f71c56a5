"""Loggers for pyreek, all nested under the ``pyreek`` logger."""

from __future__ import annotations

import logging

_LOGGER_NAME = "pyreek"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it when ``name`` is given."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


__all__ = ["get_logger"]
