"""Event sink protocol and in-memory event bus.

The auth checker never dispatches through a global: every component that
emits events receives an EventSink. InMemoryEventBus is the bundled sink,
a dictionary-based handler registry with fail-open publishing.

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(DeviceCreated, notify_new_device)
    >>> await bus.publish(DeviceCreated(device=device))
"""

import asyncio
from collections import defaultdict
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from ..logger import LoggerProtocol
from .base import AuthEvent

EventHandler = Callable[[Any], Awaitable[None]]


class EventSink(Protocol):
    """Anything events can be pushed to (fire-and-forget)."""

    async def publish(self, event: AuthEvent) -> None: ...


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Handlers registered for the exact event type run concurrently
    (asyncio.gather). A failing handler is logged and never breaks the
    publisher or the other handlers.

    Thread Safety:
        NOT thread-safe (single-threaded async design).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[AuthEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(self, event_type: type[AuthEvent], handler: EventHandler) -> None:
        """Register an async handler for an event type.

        Args:
            event_type: Event class to handle (exact type match, no inheritance).
            handler: Async callable taking the event.
        """
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type[AuthEvent], handler: EventHandler) -> bool:
        """Remove a handler.

        Returns:
            True if the handler was registered, False otherwise.
        """
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def handler_count(self, event_type: type[AuthEvent]) -> int:
        """Number of handlers registered for an event type."""
        return len(self._handlers.get(event_type, []))

    async def publish(self, event: AuthEvent) -> None:
        """Publish event to all registered handlers.

        Never raises. No handlers registered is a no-op.

        Args:
            event: Event to publish.
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handlers[idx], "__name__", repr(handlers[idx])),
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
