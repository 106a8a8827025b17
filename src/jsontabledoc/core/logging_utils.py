from __future__ import annotations

import logging

from ..errors import SkipReason


def log_skip(logger: logging.Logger, reason: SkipReason, message: str) -> None:
    """Log a standardized debug line for a structure that yields no table.

    Args:
        logger: Logger instance to emit the message.
        reason: Skip reason code.
        message: Human-readable detail message.
    """
    logger.debug("[%s] %s", reason.value, message)
