"""Shared runtime exception policy helpers."""

from __future__ import annotations

import logging
from typing import TypeAlias

# Explicitly bounded set tolerated while parsing environment configuration.
RecoverableConfigErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_CONFIG_ERRORS: RecoverableConfigErrors = (ValueError, TypeError)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit observability for a tolerated recoverable exception."""
    logger.log(level, message, exc_info=True)
