"""User model.

Minimal application user: the auth checker only needs an id to own devices
and logins, and a lookup column (email or username) to resolve lockouts.
"""

from typing import Optional

from sqlalchemy import String
from sqlmodel import Column, Field

from src.models.base import AuthCheckerModel


class User(AuthCheckerModel, table=True):
    """Application user.

    Attributes:
        email: User's email address (unique, default lockout column).
        username: Optional unique username (alternative lockout column).
        name: Display name.
    """

    __tablename__ = "users"

    email: str = Field(
        sa_column=Column(String(255), unique=True, index=True, nullable=False),
        description="User's email address (unique, used for login)",
    )
    username: Optional[str] = Field(
        default=None,
        sa_column=Column(String(150), unique=True, index=True, nullable=True),
        description="Optional unique username",
    )
    name: Optional[str] = Field(default=None, description="User's display name")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
