"""Base model classes for all database models.

The base models use SQLModel which combines SQLAlchemy and Pydantic, providing
both database ORM functionality and data validation.

Example:
    >>> from src.models.base import AuthCheckerModel
    >>>
    >>> class User(AuthCheckerModel, table=True):
    >>>     __tablename__ = "users"
    >>>
    >>>     email: str = Field(unique=True, index=True)
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import ConfigDict, field_validator
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class AuthCheckerModel(SQLModel, table=False):
    """Base model for all auth checker database models.

    Attributes:
        id: UUID primary key, automatically generated.
        created_at: Timestamp when the record was created (UTC).

    Note:
        This is an abstract base class. Always inherit from it with table=True:
        >>> class MyModel(AuthCheckerModel, table=True):
        >>>     __tablename__ = "my_table"
    """

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        index=True,
        description="Unique identifier for the record",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_type=DateTime(timezone=True),
        nullable=False,
        index=True,
        description="Timestamp when the record was created",
    )

    @field_validator("created_at", mode="before")
    @classmethod
    def ensure_timezone_aware(cls, v: datetime) -> datetime:
        """Ensure created_at is timezone-aware (UTC)."""
        if isinstance(v, datetime) and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    model_config = ConfigDict(  # type: ignore[assignment]
        from_attributes=True,  # Allow reading from ORM objects (SQLAlchemy)
        validate_assignment=True,  # Validate field assignments
    )
