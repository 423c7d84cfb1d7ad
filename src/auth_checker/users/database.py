"""Database user store using the app's SQLAlchemy User model."""

from typing import Any, Optional, Type

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import PersistenceError
from .base import UserStore


class DatabaseUserStore(UserStore):
    """Resolve users with ``SELECT ... WHERE <column> = :value LIMIT 1``.

    Args:
        db_session: AsyncSession for database operations (app provides)
        user_model: App's concrete User table class
    """

    def __init__(self, db_session: AsyncSession, user_model: Type[Any]):
        self.db = db_session
        self.user_model = user_model

    async def find_by_column(self, column: str, value: Any) -> Optional[Any]:
        column_attr = getattr(self.user_model, column, None)
        if column_attr is None:
            return None

        stmt = select(self.user_model).where(column_attr == value).limit(1)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PersistenceError(
                "Failed to look up user", details={"column": column}
            ) from e
        return result.scalars().first()
