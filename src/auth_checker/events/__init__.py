"""Auth checker events and event bus."""

from .auth_events import DeviceCreated, FailedAuth, LockoutAuth, LoginCreated
from .base import AuthEvent
from .bus import EventHandler, EventSink, InMemoryEventBus
from .handlers import LoggingEventHandler

__all__ = [
    "AuthEvent",
    "DeviceCreated",
    "EventHandler",
    "EventSink",
    "FailedAuth",
    "InMemoryEventBus",
    "LockoutAuth",
    "LoggingEventHandler",
    "LoginCreated",
]
