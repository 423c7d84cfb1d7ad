"""Database-agnostic auth checker storage implementation.

Works with ANY SQLAlchemy-compatible database (PostgreSQL, MySQL, SQLite).
App provides AsyncSession and concrete Device/Login models.
Package NEVER creates tables - app manages schema via Alembic.
"""

from typing import Any, List, Optional, Type

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import PersistenceError
from ..models.base import DeviceBase, LoginBase, LoginType
from .base import AuthCheckerStorage


class DatabaseAuthCheckerStorage(AuthCheckerStorage):
    """Database-agnostic storage implementation.

    Design Pattern:
        - App controls connection string (determines database type)
        - App provides AsyncSession (from their database configuration)
        - App provides Device/Login models (with database-specific types)

    Example:
        ```python
        from src.models.device import Device
        from src.models.login import Login

        storage = DatabaseAuthCheckerStorage(db_session, Device, Login)
        ```

    Failures:
        Any SQLAlchemyError (read or write) is rolled back and re-raised as
        PersistenceError, leaving the session usable.
    """

    def __init__(
        self,
        db_session: AsyncSession,
        device_model: Type[DeviceBase],
        login_model: Type[LoginBase],
    ):
        """Initialize storage with app's database session and models.

        Args:
            db_session: AsyncSession for database operations (app provides)
            device_model: App's concrete Device table class
            login_model: App's concrete Login table class
        """
        self.db = db_session
        self.device_model: Any = device_model
        self.login_model: Any = login_model

    async def list_devices(self, user_id: Any) -> List[DeviceBase]:
        stmt = (
            select(self.device_model)
            .where(self.device_model.user_id == user_id)
            .order_by(self.device_model.created_at.asc())
        )
        result = await self._execute(
            stmt, "Failed to list devices", {"user_id": str(user_id)}
        )
        return list(result.scalars().all())

    async def create_device(self, user_id: Any, **attributes: Any) -> DeviceBase:
        device = self.device_model(user_id=user_id, **attributes)
        await self._save(device, "device")
        return device

    async def create_login(
        self,
        user_id: Any,
        device_id: Any,
        login_type: LoginType,
        ip_address: Optional[str],
        ip_insights: dict[str, Any],
    ) -> LoginBase:
        login = self.login_model(
            user_id=user_id,
            device_id=device_id,
            type=login_type.value,
            ip_address=ip_address,
            ip_insights=ip_insights,
        )
        await self._save(login, "login")
        return login

    async def latest_login(self, device_id: Any) -> Optional[LoginBase]:
        stmt = (
            select(self.login_model)
            .where(self.login_model.device_id == device_id)
            .order_by(self.login_model.created_at.desc())
            .limit(1)
        )
        result = await self._execute(
            stmt, "Failed to load latest login", {"device_id": str(device_id)}
        )
        return result.scalars().first()

    async def list_logins(self, device_id: Any) -> List[LoginBase]:
        stmt = (
            select(self.login_model)
            .where(self.login_model.device_id == device_id)
            .order_by(self.login_model.created_at.desc())
        )
        result = await self._execute(
            stmt, "Failed to list logins", {"device_id": str(device_id)}
        )
        return list(result.scalars().all())

    async def _execute(self, stmt: Any, message: str, details: dict[str, Any]) -> Any:
        """Run a read query.

        Raises:
            PersistenceError: If the query fails (transaction rolled back)
        """
        try:
            return await self.db.execute(stmt)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PersistenceError(message, details={**details, "error": str(e)}) from e

    async def _save(self, record: Any, kind: str) -> None:
        """Add, commit and refresh one record.

        Raises:
            PersistenceError: If the write fails (transaction rolled back)
        """
        self.db.add(record)
        try:
            await self.db.commit()
            await self.db.refresh(record)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PersistenceError(
                f"Failed to persist {kind}", details={"error": str(e)}
            ) from e
