"""Logging event handler for auth checker events.

Writes one structured log line per published event.

Log Levels:
    - INFO: DeviceCreated, LoginCreated (normal operations)
    - WARNING: FailedAuth, LockoutAuth (security relevant)

Usage:
    >>> handler = LoggingEventHandler(logger=get_logger())
    >>> handler.register(event_bus)
"""

from ..logger import LoggerProtocol
from .auth_events import DeviceCreated, FailedAuth, LockoutAuth, LoginCreated
from .bus import InMemoryEventBus


class LoggingEventHandler:
    """Event handler for structured logging of auth checker events."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def register(self, bus: InMemoryEventBus) -> None:
        """Subscribe all handlers of this class to the bus."""
        bus.subscribe(DeviceCreated, self.handle_device_created)
        bus.subscribe(LoginCreated, self.handle_login_created)
        bus.subscribe(FailedAuth, self.handle_failed_auth)
        bus.subscribe(LockoutAuth, self.handle_lockout_auth)

    async def handle_device_created(self, event: DeviceCreated) -> None:
        """Log new device (INFO level)."""
        device = event.device
        self._logger.info(
            "device_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            device_id=str(getattr(device, "id", None)),
            user_id=str(getattr(device, "user_id", None)),
            device_info=device.device_info,
        )

    async def handle_login_created(self, event: LoginCreated) -> None:
        """Log persisted login (INFO level)."""
        login = event.login
        self._logger.info(
            "login_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            login_id=str(getattr(login, "id", None)),
            device_id=str(getattr(login, "device_id", None)),
            user_id=str(getattr(login, "user_id", None)),
            login_type=str(getattr(login, "type", None)),
        )

    async def handle_failed_auth(self, event: FailedAuth) -> None:
        """Log failed authentication (WARNING level)."""
        self._logger.warning(
            "auth_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            login_id=str(getattr(event.login, "id", None)),
            user_id=str(getattr(event.login, "user_id", None)),
            device_id=str(getattr(event.device, "id", None)),
            ip_address=getattr(event.login, "ip_address", None),
        )

    async def handle_lockout_auth(self, event: LockoutAuth) -> None:
        """Log lockout (WARNING level)."""
        self._logger.warning(
            "auth_lockout",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            login_id=str(getattr(event.login, "id", None)),
            user_id=str(getattr(event.login, "user_id", None)),
            device_id=str(getattr(event.device, "id", None)),
            ip_address=getattr(event.login, "ip_address", None),
        )
