"""Login model - one recorded authentication outcome."""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import JSON, String
from sqlmodel import Column, Field

from src.auth_checker.models.base import LoginBase, LoginType
from src.models.base import AuthCheckerModel


class Login(AuthCheckerModel, LoginBase, table=True):
    """Login record (implements LoginBase).

    Attributes:
        user_id: User the outcome was recorded for
        device_id: Device the request came from
        ip_address: Client IP address
        ip_insights: Geolocation payload ({} when unavailable)
        type: "login", "failed" or "lockout"
    """

    __tablename__ = "logins"

    user_id: UUID = Field(
        foreign_key="users.id",
        nullable=False,
        index=True,
        ondelete="CASCADE",
    )
    device_id: UUID = Field(
        foreign_key="devices.id",
        nullable=False,
        index=True,
        ondelete="CASCADE",
    )

    ip_address: Optional[str] = Field(
        default=None, sa_column=Column(String(45), nullable=True)
    )
    ip_insights: dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
        description="Geolocation enrichment payload",
    )
    type: str = Field(
        default=LoginType.LOGIN.value,
        sa_column=Column(String(20), nullable=False, index=True),
        description="Login type (login, failed, lockout)",
    )

    def __repr__(self) -> str:
        return (
            f"<Login(id={self.id}, device_id={self.device_id}, type={self.type})>"
        )
