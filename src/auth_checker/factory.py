"""Auth checker factory for dependency injection.

This module provides the factory function that builds a fully wired
AuthCheckerService from configuration plus the application's external
dependencies (database session, models, event sink).

Usage:
    from src.auth_checker.factory import get_auth_checker
    from src.auth_checker.models.settings import get_settings
    from src.models.device import Device
    from src.models.login import Login
    from src.models.user import User

    checker = get_auth_checker(
        config=get_settings().to_config(),
        db_session=db_session,
        device_model=Device,
        login_model=Login,
        user_model=User,
    )
"""

from typing import Any, Iterable, Optional, Type

from sqlalchemy.ext.asyncio import AsyncSession

from .agent.base import AgentExtractor
from .agent.user_agent import UserAgentExtractor
from .events.bus import EventSink, InMemoryEventBus
from .events.handlers import LoggingEventHandler
from .geolocation.base import GeolocationLookup, NullGeolocationLookup
from .geolocation.maxmind import MaxMindGeolocationLookup
from .logger import LoggerProtocol, get_logger
from .matcher import DeviceMatcher
from .models.base import DeviceBase, LoginBase
from .models.config import AuthCheckerConfig
from .recorder import LoginRecorder
from .registry import DeviceRegistry
from .service import AuthCheckerService
from .storage.base import AuthCheckerStorage
from .storage.database import DatabaseAuthCheckerStorage
from .storage.memory import MemoryAuthCheckerStorage
from .throttle import Clock, ThrottlePolicy, utcnow
from .users.base import UserStore
from .users.database import DatabaseUserStore
from .users.memory import MemoryUserStore


def get_auth_checker(
    config: AuthCheckerConfig,
    db_session: Optional[AsyncSession] = None,
    device_model: Optional[Type[DeviceBase]] = None,
    login_model: Optional[Type[LoginBase]] = None,
    user_model: Optional[Type[Any]] = None,
    user_store: Optional[UserStore] = None,
    event_sink: Optional[EventSink] = None,
    geolocation: Optional[GeolocationLookup] = None,
    extractor: Optional[AgentExtractor] = None,
    logger: Optional[LoggerProtocol] = None,
    clock: Clock = utcnow,
) -> AuthCheckerService:
    """Create configured AuthCheckerService instance.

    Args:
        config: Auth checker configuration
        db_session: Database session (required for "database" storage)
        device_model: App's Device model (required for "database" storage)
        login_model: App's Login model (required for "database" storage)
        user_model: App's User model (database user lookup for lockouts)
        user_store: Explicit user store (overrides user_model)
        event_sink: Where events go (default: InMemoryEventBus with logging)
        geolocation: Explicit geolocation lookup (overrides config)
        extractor: Explicit agent extractor (default: UserAgentExtractor)
        logger: Logger instance (default: process-wide console logger)
        clock: Current-time source for the throttle policy

    Returns:
        Fully configured AuthCheckerService instance

    Raises:
        ValueError: If required dependencies are missing for chosen config
    """
    logger = logger or get_logger()

    if event_sink is None:
        bus = InMemoryEventBus(logger=logger)
        LoggingEventHandler(logger=logger).register(bus)
        event_sink = bus

    storage = _create_storage(config, db_session, device_model, login_model)
    user_store = user_store or _create_user_store(config, db_session, user_model)
    geolocation = geolocation or _create_geolocation(config)

    registry = DeviceRegistry(
        storage=storage,
        matcher=DeviceMatcher(config.device_matching_attributes),
        event_sink=event_sink,
        logger=logger,
    )
    recorder = LoginRecorder(
        storage=storage,
        geolocation=geolocation,
        event_sink=event_sink,
        logger=logger,
    )

    return AuthCheckerService(
        config=config,
        extractor=extractor or UserAgentExtractor(),
        registry=registry,
        throttle=ThrottlePolicy(throttle_minutes=config.throttle, clock=clock),
        recorder=recorder,
        storage=storage,
        user_store=user_store,
        event_sink=event_sink,
        logger=logger,
    )


def _create_storage(
    config: AuthCheckerConfig,
    db_session: Optional[AsyncSession],
    device_model: Optional[Type[DeviceBase]],
    login_model: Optional[Type[LoginBase]],
) -> AuthCheckerStorage:
    """Create storage backend based on configuration.

    Raises:
        ValueError: If storage_type is invalid or required dependencies missing
    """
    if config.storage_type == "database":
        if db_session is None:
            raise ValueError("db_session is required for 'database' storage")
        if device_model is None or login_model is None:
            raise ValueError(
                "device_model and login_model are required for 'database' storage"
            )
        return DatabaseAuthCheckerStorage(
            db_session=db_session,
            device_model=device_model,
            login_model=login_model,
        )
    elif config.storage_type == "memory":
        kwargs: dict[str, Any] = {}
        if device_model is not None:
            kwargs["device_model"] = device_model
        if login_model is not None:
            kwargs["login_model"] = login_model
        return MemoryAuthCheckerStorage(**kwargs)
    else:
        raise ValueError(
            f"Invalid storage_type: {config.storage_type}. "
            f"Must be 'database' or 'memory'"
        )


def _create_user_store(
    config: AuthCheckerConfig,
    db_session: Optional[AsyncSession],
    user_model: Optional[Type[Any]],
) -> UserStore:
    """Create the user store used to resolve lockouts.

    Without a user model there is nothing to query; an empty memory store
    makes every lockout a no-op.
    """
    if user_model is not None:
        if db_session is None:
            raise ValueError("db_session is required to look up users by model")
        return DatabaseUserStore(db_session=db_session, user_model=user_model)
    return MemoryUserStore()


def _create_geolocation(config: AuthCheckerConfig) -> GeolocationLookup:
    """Create geolocation lookup based on configuration."""
    if config.geolocation_type == "maxmind":
        return MaxMindGeolocationLookup(db_path=config.geoip_db_path)
    elif config.geolocation_type == "none":
        return NullGeolocationLookup()
    else:
        raise ValueError(
            f"Invalid geolocation_type: {config.geolocation_type}. "
            f"Must be 'maxmind' or 'none'"
        )


# Convenience functions for common scenarios


def get_auth_checker_for_testing(
    users: Optional[Iterable[Any]] = None,
    config: Optional[AuthCheckerConfig] = None,
    event_sink: Optional[EventSink] = None,
    geolocation: Optional[GeolocationLookup] = None,
    clock: Clock = utcnow,
) -> AuthCheckerService:
    """Create auth checker for testing (memory storage, no geolocation).

    Example:
        >>> checker = get_auth_checker_for_testing(users=[user])
    """
    from .models.config import TESTING_CONFIG

    return get_auth_checker(
        config=config or TESTING_CONFIG,
        user_store=MemoryUserStore(users),
        event_sink=event_sink,
        geolocation=geolocation,
        clock=clock,
    )
