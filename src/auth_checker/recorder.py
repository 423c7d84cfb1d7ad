"""Login recorder - persists enriched Login records."""

from typing import Any, Optional

from .events.auth_events import LoginCreated
from .events.bus import EventSink
from .geolocation.base import GeolocationLookup
from .logger import LoggerProtocol
from .models.base import AuthenticatableUser, DeviceBase, LoginBase, LoginType
from .storage.base import AuthCheckerStorage


class LoginRecorder:
    """Creates Login records with best-effort IP geolocation.

    Flow:
        1. Geolocation lookup (any failure degrades to an empty payload)
        2. Storage persists the login (failures propagate)
        3. LoginCreated is published
    """

    def __init__(
        self,
        storage: AuthCheckerStorage,
        geolocation: GeolocationLookup,
        event_sink: EventSink,
        logger: LoggerProtocol,
    ):
        self.storage = storage
        self.geolocation = geolocation
        self.event_sink = event_sink
        self._logger = logger

    async def record_login(
        self,
        user: AuthenticatableUser,
        device: DeviceBase,
        login_type: LoginType = LoginType.LOGIN,
        ip_address: Optional[str] = None,
    ) -> LoginBase:
        """Persist a login for the device and announce it.

        Args:
            user: User the event is recorded for
            device: Device the request came from
            login_type: LOGIN, FAILED or LOCKOUT
            ip_address: Client IP supplied by the caller

        Returns:
            The persisted login

        Raises:
            PersistenceError: If the write fails (no event is published)
        """
        ip_insights = await self.lookup_ip_insights(ip_address)

        login = await self.storage.create_login(
            user_id=user.id,
            device_id=device.id,  # type: ignore[attr-defined]
            login_type=login_type,
            ip_address=ip_address,
            ip_insights=ip_insights,
        )

        self._logger.debug(
            "login_recorded",
            user_id=str(user.id),
            device_id=str(device.id),  # type: ignore[attr-defined]
            login_type=login_type.value,
            has_ip_insights=bool(ip_insights),
        )

        await self.event_sink.publish(LoginCreated(login=login))
        return login

    async def lookup_ip_insights(self, ip_address: Optional[str]) -> dict[str, Any]:
        """Geolocate the IP, returning {} on any failure."""
        if not ip_address:
            return {}

        try:
            return dict(await self.geolocation.lookup(ip_address))
        except Exception as e:
            self._logger.warning(
                "geolocation_lookup_failed",
                ip_address=ip_address,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return {}
