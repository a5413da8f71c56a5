"""Error handler that logs examination errors instead of raising them."""

from __future__ import annotations

import logging
from typing import List, Optional

from .errors import BaseError
from .logging import get_logger


class LoggingErrorHandler:
    """Logs every handled error as a warning and remembers it."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or get_logger("errors")
        self.errors: List[BaseError] = []

    def handle(self, error: BaseError) -> bool:
        self.errors.append(error)
        self.logger.warning("Skipping %s: %s", error.origin or "source", error)
        return True


__all__ = ["LoggingErrorHandler"]
