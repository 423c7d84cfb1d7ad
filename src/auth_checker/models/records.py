"""Plain in-memory Device and Login records.

Default models for MemoryAuthCheckerStorage. Applications using the
database storage pass their SQLModel tables instead.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from .base import DeviceBase, LoginBase, LoginType


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(eq=False, kw_only=True)
class DeviceRecord(DeviceBase):
    """In-memory device (implements DeviceBase)."""

    user_id: Any
    platform: str | None = None
    platform_version: str | None = None
    browser: str | None = None
    browser_version: str | None = None
    is_desktop: bool = False
    is_mobile: bool = False
    language: str | None = None
    fingerprint: str | None = None
    ip_address: str | None = None
    pin: str | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)


@dataclass(eq=False, kw_only=True)
class LoginRecord(LoginBase):
    """In-memory login (implements LoginBase)."""

    user_id: Any
    device_id: Any
    type: LoginType = LoginType.LOGIN
    ip_address: str | None = None
    ip_insights: dict[str, Any] = field(default_factory=dict)
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
