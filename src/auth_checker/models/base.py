"""Device and Login domain model contracts.

This module defines the abstract DeviceBase and LoginBase interfaces that
applications implement with their chosen ORM (SQLModel in this repository,
see src/models/device.py and src/models/login.py).

Package defines REQUIRED fields and the small amount of shared behavior.
Apps implement concrete models with their chosen database types.
"""

from abc import ABC
from enum import Enum
from typing import Any, Protocol


class LoginType(str, Enum):
    """Kind of authentication outcome a Login records.

    String Enum:
        Inherits from str so values serialize directly to the database
        column and to log context.
    """

    LOGIN = "login"
    FAILED = "failed"
    LOCKOUT = "lockout"


class AuthenticatableUser(Protocol):
    """Anything with an ``id`` can own devices and logins."""

    id: Any


class DeviceBase(ABC):
    """Abstract interface for device models.

    A Device is the package's notion of "the thing the request came from".
    It is created once, from the first unmatched request, and afterwards only
    matched against; login handling never updates its attributes.

    Required Properties/Attributes (implement in concrete class):
        id: Device identifier (UUID recommended)
        user_id: Owning user's identifier
        platform: Operating system family ("Mac OS X", "Windows", "iOS")
        platform_version: OS version, "0" when unknown
        browser: Browser family ("Chrome", "Firefox")
        browser_version: Browser version, "" when unknown
        is_desktop: Desktop device class flag
        is_mobile: Mobile device class flag
        language: Preferred locale (first Accept-Language entry) or None
        fingerprint: Opaque session-bound fingerprint or None
        ip_address: IP address seen when the device was created
        pin: Six digit code for out-of-band device verification
        created_at: Creation timestamp (timezone-aware UTC)

    Example Implementation (SQLModel):
        ```python
        class Device(AuthCheckerModel, DeviceBase, table=True):
            __tablename__ = "devices"

            user_id: UUID = Field(foreign_key="users.id", index=True)
            platform: str | None = None
            ...
        ```
    """

    @property
    def device_info(self) -> str:
        """Human-readable device summary, e.g. "Chrome on Mac OS X"."""
        browser = getattr(self, "browser", None)
        platform = getattr(self, "platform", None)
        if browser and platform:
            return f"{browser} on {platform}"
        return browser or platform or "Unknown device"


class LoginBase(ABC):
    """Abstract interface for login models.

    Every Login belongs to exactly one Device. The most recent Login of a
    device (by created_at) drives throttle decisions.

    Required Properties/Attributes (implement in concrete class):
        id: Login identifier
        user_id: User the event was recorded for
        device_id: Device the event came from
        ip_address: Client IP address (may be None)
        ip_insights: Geolocation payload (dict, possibly empty)
        type: LoginType value ("login", "failed", "lockout")
        created_at: Creation timestamp (timezone-aware UTC)
    """

    @property
    def is_failure(self) -> bool:
        """True for FAILED and LOCKOUT records."""
        return LoginType(getattr(self, "type")) is not LoginType.LOGIN
