"""Structured logging for the auth checker package.

Every component logs through LoggerProtocol: a snake_case event name plus
key-value context. ConsoleAdapter is the structlog-backed default.

Usage:
    from src.auth_checker.logger import get_logger

    logger = get_logger()
    logger.debug("device_registered", user_id=str(user_id), device_id=str(device.id))
"""

import logging
import sys
from functools import lru_cache
from typing import Any, Protocol

import structlog


class LoggerProtocol(Protocol):
    """Levels the package emits at (structural typing)."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...


class ConsoleAdapter:
    """Structured lines on stdout via structlog.

    Args:
        use_json: JSON lines instead of the key=value console format.
        level: Minimum level emitted.
    """

    def __init__(self, *, use_json: bool = False, level: int = logging.INFO) -> None:
        renderer = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(level),
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger("auth_checker")

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)


@lru_cache
def get_logger() -> LoggerProtocol:
    """Process-wide console logger (created on first call)."""
    return ConsoleAdapter()
