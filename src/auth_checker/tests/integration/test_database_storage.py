"""Integration tests for the database adapters.

Runs DatabaseAuthCheckerStorage, DatabaseUserStore and the full service
against an in-memory SQLite database (aiosqlite) using the application's
SQLModel tables.
"""

from datetime import timedelta

import pytest
import pytest_asyncio
from freezegun import freeze_time
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel

from src.auth_checker.errors import PersistenceError
from src.auth_checker.events.auth_events import DeviceCreated, LockoutAuth
from src.auth_checker.factory import get_auth_checker
from src.auth_checker.models.base import LoginType
from src.auth_checker.models.config import AuthCheckerConfig
from src.auth_checker.models.descriptor import RequestContext
from src.auth_checker.storage.database import DatabaseAuthCheckerStorage
from src.auth_checker.tests.fixtures.mock_models import (
    CHROME_MAC_UA,
    RecordingEventSink,
)
from src.auth_checker.users.database import DatabaseUserStore
from src.models import Device, Login, User


@pytest_asyncio.fixture
async def db_session():
    """Fresh in-memory database with all tables created."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def db_user(db_session):
    """Persisted user."""
    user = User(email="alice@example.com", username="alice")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
def storage(db_session):
    return DatabaseAuthCheckerStorage(db_session, Device, Login)


class TestDatabaseAuthCheckerStorage:
    @pytest.mark.asyncio
    async def test_create_and_list_devices(self, storage, db_user):
        with freeze_time("2024-01-01 12:00:00") as frozen:
            first = await storage.create_device(
                db_user.id, platform="Mac OS X", browser="Chrome", pin="123456"
            )
            frozen.tick(timedelta(minutes=1))
            second = await storage.create_device(db_user.id, platform="iOS")

        devices = await storage.list_devices(db_user.id)

        assert [d.id for d in devices] == [first.id, second.id]
        assert devices[0].device_info == "Chrome on Mac OS X"
        assert devices[0].pin == "123456"
        assert devices[1].is_mobile is False

    @pytest.mark.asyncio
    async def test_create_login_round_trips_json(self, storage, db_user):
        device = await storage.create_device(db_user.id, platform="Mac OS X")

        login = await storage.create_login(
            user_id=db_user.id,
            device_id=device.id,
            login_type=LoginType.FAILED,
            ip_address="81.2.69.142",
            ip_insights={"location": "London, GB", "latitude": 51.5142},
        )

        stored = (await storage.list_logins(device.id))[0]
        assert stored.id == login.id
        assert stored.type == "failed"
        assert stored.is_failure is True
        assert stored.ip_insights == {"location": "London, GB", "latitude": 51.5142}

    @pytest.mark.asyncio
    async def test_latest_login(self, storage, db_user):
        device = await storage.create_device(db_user.id)

        with freeze_time("2024-01-01 12:00:00") as frozen:
            await storage.create_login(db_user.id, device.id, LoginType.LOGIN, None, {})
            frozen.tick(timedelta(minutes=3))
            newest = await storage.create_login(
                db_user.id, device.id, LoginType.LOGIN, None, {}
            )

        latest = await storage.latest_login(device.id)

        assert latest.id == newest.id
        assert [login.id for login in await storage.list_logins(device.id)][0] == (
            newest.id
        )

    @pytest.mark.asyncio
    async def test_latest_login_none(self, storage, db_user):
        device = await storage.create_device(db_user.id)
        assert await storage.latest_login(device.id) is None

    @pytest.mark.asyncio
    async def test_write_failure_raises_persistence_error(self, db_session, db_user):
        storage = DatabaseAuthCheckerStorage(db_session, Device, Login)
        duplicate = User(email="alice@example.com")

        with pytest.raises(PersistenceError):
            await storage._save(duplicate, "user")


class TestDatabaseUserStore:
    @pytest.mark.asyncio
    async def test_find_by_column(self, db_session, db_user):
        store = DatabaseUserStore(db_session, User)

        found = await store.find_by_column("email", "alice@example.com")

        assert found.id == db_user.id
        assert (await store.find_by_column("username", "alice")).id == db_user.id
        assert await store.find_by_column("email", "nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_unknown_column(self, db_session, db_user):
        store = DatabaseUserStore(db_session, User)
        assert await store.find_by_column("phone", "555-0100") is None


class TestServiceWithDatabase:
    """Full flow against real tables."""

    @pytest.mark.asyncio
    async def test_login_then_lockout(self, db_session, db_user):
        sink = RecordingEventSink()
        checker = get_auth_checker(
            AuthCheckerConfig(throttle=10),
            db_session=db_session,
            device_model=Device,
            login_model=Login,
            user_model=User,
            event_sink=sink,
        )
        context = RequestContext(
            user_agent=CHROME_MAC_UA,
            accept_language="en-US",
            ip_address="203.0.113.10",
            session_fingerprint="fp-1",
        )

        with freeze_time("2024-01-01 12:00:00") as frozen:
            first = await checker.on_login(db_user, context)
            frozen.tick(timedelta(minutes=2))
            throttled = await checker.on_login(db_user, context)
            lockout = await checker.on_lockout({"email": db_user.email}, context)

        assert first is not None
        assert throttled is None
        assert lockout.type == LoginType.LOCKOUT.value
        assert lockout.device_id == first.device_id
        assert len(sink.of_type(DeviceCreated)) == 1
        assert len(sink.of_type(LockoutAuth)) == 1
        assert len(await checker.storage.list_logins(first.device_id)) == 2
