"""Login throttle policy.

Suppresses repeat successful-login records from the same device within a
configurable window. Failed attempts and lockouts are never throttled;
the orchestrator only consults this policy for successful logins.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Optional

from .models.base import LoginBase

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Default clock: timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps (e.g. read back from SQLite) are stored as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def should_record_login(
    last_login_at: Optional[datetime], throttle_minutes: int, now: datetime
) -> bool:
    """Pure throttle decision.

    Args:
        last_login_at: created_at of the device's most recent login, or None
        throttle_minutes: Window length in minutes (0 disables throttling)
        now: Current time

    Returns:
        False only when the last login is strictly within the window

    Examples:
        >>> now = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        >>> should_record_login(now - timedelta(minutes=5), 10, now)
        False
        >>> should_record_login(now - timedelta(minutes=15), 10, now)
        True
    """
    if throttle_minutes == 0 or last_login_at is None:
        return True

    cutoff = _as_utc(now) - timedelta(minutes=throttle_minutes)
    return not _as_utc(last_login_at) > cutoff


class ThrottlePolicy:
    """Throttle decisions with an injectable clock.

    Args:
        throttle_minutes: Default window (config.throttle)
        clock: Callable returning the current time (tests pass a fixed one)
    """

    def __init__(self, throttle_minutes: int = 0, clock: Clock = utcnow):
        self.throttle_minutes = throttle_minutes
        self.clock = clock

    def should_record_login(
        self,
        last_login: Optional[LoginBase],
        throttle_minutes: Optional[int] = None,
    ) -> bool:
        """Decide whether a new LOGIN should be written for a device.

        Args:
            last_login: The device's most recent login, or None
            throttle_minutes: Override of the configured window

        Returns:
            True to record, False to suppress
        """
        minutes = self.throttle_minutes if throttle_minutes is None else throttle_minutes
        last_login_at = getattr(last_login, "created_at", None) if last_login else None
        return should_record_login(last_login_at, minutes, self.clock())
