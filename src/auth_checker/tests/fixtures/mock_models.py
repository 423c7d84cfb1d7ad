"""Mock models for auth checker package testing.

Test doubles that satisfy the package interfaces without any database.
"""

from typing import Any, List, Optional
from uuid import UUID, uuid4

from src.auth_checker.events.base import AuthEvent


class MockUser:
    """Mock user (anything with an ``id`` is an AuthenticatableUser)."""

    def __init__(
        self,
        id: Optional[UUID] = None,
        email: str = "user@example.com",
        username: Optional[str] = None,
    ):
        self.id = id or uuid4()
        self.email = email
        self.username = username


class RecordingEventSink:
    """EventSink that keeps every published event in order."""

    def __init__(self) -> None:
        self.events: List[AuthEvent] = []

    async def publish(self, event: AuthEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: type) -> List[Any]:
        """Published events of exactly ``event_type``."""
        return [event for event in self.events if type(event) is event_type]


CHROME_MAC_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
SAFARI_IPHONE_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
)
