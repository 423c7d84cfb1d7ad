"""Device model - a client a user has authenticated from.

Rows are written by the auth checker the first time a request does not
match any of the user's known devices, and never updated afterwards.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import Boolean, String
from sqlmodel import Column, Field

from src.auth_checker.models.base import DeviceBase
from src.models.base import AuthCheckerModel


class Device(AuthCheckerModel, DeviceBase, table=True):
    """User device (implements DeviceBase).

    Attributes:
        user_id: User who owns this device
        platform: OS family ("Mac OS X", "Windows", "iOS")
        platform_version: OS version ("0" when unknown)
        browser: Browser family
        browser_version: Browser version
        is_desktop: Desktop device class
        is_mobile: Mobile device class
        language: Preferred locale
        fingerprint: Session fingerprint (client supplied or SHA256 fallback)
        ip_address: IP address seen when the device was first registered
        pin: Six digit out-of-band verification code
    """

    __tablename__ = "devices"

    user_id: UUID = Field(
        foreign_key="users.id",
        nullable=False,
        index=True,
        ondelete="CASCADE",
        description="User who owns this device",
    )

    platform: Optional[str] = Field(
        default=None, sa_column=Column(String(100), nullable=True)
    )
    platform_version: Optional[str] = Field(
        default=None, sa_column=Column(String(50), nullable=True)
    )
    browser: Optional[str] = Field(
        default=None, sa_column=Column(String(100), nullable=True)
    )
    browser_version: Optional[str] = Field(
        default=None, sa_column=Column(String(50), nullable=True)
    )

    is_desktop: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, server_default="0"),
    )
    is_mobile: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, server_default="0"),
    )

    language: Optional[str] = Field(
        default=None, sa_column=Column(String(35), nullable=True)
    )
    fingerprint: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True, index=True),
        description="Session-bound device fingerprint",
    )
    ip_address: Optional[str] = Field(
        default=None,
        sa_column=Column(String(45), nullable=True),
        description="IP address at registration (IPv6 max length 45)",
    )
    pin: Optional[str] = Field(
        default=None,
        sa_column=Column(String(6), nullable=True),
        description="Out-of-band verification code",
    )

    def __repr__(self) -> str:
        return (
            f"<Device("
            f"id={self.id}, "
            f"user_id={self.user_id}, "
            f"device={self.device_info}"
            f")>"
        )
