"""Auth checker service - orchestrator for authentication outcomes.

This is the main entry point of the package. It coordinates:
- Agent extractor (request metadata -> descriptor)
- Device registry (find or create the request's device)
- Throttle policy (skip repeat logins)
- Login recorder (persist + geolocate + announce)
- User store (resolve lockout payloads)
"""

from collections.abc import Mapping
from typing import Any, Optional

from .agent.base import AgentExtractor
from .events.auth_events import FailedAuth, LockoutAuth
from .events.bus import EventSink
from .logger import LoggerProtocol
from .models.base import AuthenticatableUser, DeviceBase, LoginBase, LoginType
from .models.config import AuthCheckerConfig
from .models.descriptor import RequestContext
from .recorder import LoginRecorder
from .registry import DeviceRegistry
from .storage.base import AuthCheckerStorage
from .throttle import ThrottlePolicy
from .users.base import UserStore


class AuthCheckerService:
    """Auth checker service - orchestrator.

    Three entry points, each meant to be called once per real-world
    authentication event:

        on_login:   device -> throttle check -> LOGIN
        on_failed:  device -> FAILED -> FailedAuth
        on_lockout: user lookup -> device -> LOCKOUT -> LockoutAuth

    Example:
        ```python
        service = get_auth_checker(config=..., db_session=..., ...)

        # FastAPI: headers, client IP and X-Device-Fingerprint (or the
        # SHA256 fallback), so repeat logins match the same device
        context = build_request_context(request, service.config.trust_forwarded_ip)
        await service.on_login(user, context)

        # Elsewhere, supply the session fingerprint yourself
        context = RequestContext(
            user_agent=user_agent,
            accept_language=accept_language,
            ip_address=client_ip,
            session_fingerprint=session_fingerprint,
        )
        ```
    """

    def __init__(
        self,
        config: AuthCheckerConfig,
        extractor: AgentExtractor,
        registry: DeviceRegistry,
        throttle: ThrottlePolicy,
        recorder: LoginRecorder,
        storage: AuthCheckerStorage,
        user_store: UserStore,
        event_sink: EventSink,
        logger: LoggerProtocol,
    ):
        self.config = config
        self.extractor = extractor
        self.registry = registry
        self.throttle = throttle
        self.recorder = recorder
        self.storage = storage
        self.user_store = user_store
        self.event_sink = event_sink
        self._logger = logger

    async def find_or_create_device(
        self, user: AuthenticatableUser, context: RequestContext
    ) -> DeviceBase:
        """Resolve the device the request came from (created if unknown)."""
        descriptor = await self.extractor.extract(context)
        return await self.registry.find_or_create_device(user, descriptor)

    async def on_login(
        self, user: AuthenticatableUser, context: RequestContext
    ) -> Optional[LoginBase]:
        """Handle a successful login.

        Args:
            user: Authenticated user
            context: Request metadata

        Returns:
            The recorded login, or None when throttled
        """
        device = await self.find_or_create_device(user, context)

        last_login = await self.storage.latest_login(device.id)  # type: ignore[attr-defined]
        if not self.throttle.should_record_login(last_login):
            self._logger.debug(
                "login_throttled",
                user_id=str(user.id),
                device_id=str(device.id),  # type: ignore[attr-defined]
                throttle_minutes=self.throttle.throttle_minutes,
            )
            return None

        return await self.recorder.record_login(
            user, device, LoginType.LOGIN, context.ip_address
        )

    async def on_failed(
        self, user: AuthenticatableUser, context: RequestContext
    ) -> LoginBase:
        """Handle a failed authentication attempt (never throttled).

        Args:
            user: User the attempt targeted
            context: Request metadata

        Returns:
            The recorded FAILED login
        """
        device = await self.find_or_create_device(user, context)
        login = await self.recorder.record_login(
            user, device, LoginType.FAILED, context.ip_address
        )
        await self.event_sink.publish(FailedAuth(login=login, device=device))
        return login

    async def on_lockout(
        self, payload: Mapping[str, Any], context: RequestContext
    ) -> Optional[LoginBase]:
        """Handle a lockout raised by the outer authentication flow.

        The payload carries credentials, not a user; the user is resolved
        through ``config.login_column``. Unresolvable payloads are ignored.

        Args:
            payload: Submitted credentials (e.g. {"email": "x@example.com"})
            context: Request metadata

        Returns:
            The recorded LOCKOUT login, or None when no user resolved
        """
        user = await self.find_user_from_payload(payload)
        if user is None:
            self._logger.debug(
                "lockout_user_not_resolved", login_column=self.config.login_column
            )
            return None

        device = await self.find_or_create_device(user, context)
        login = await self.recorder.record_login(
            user, device, LoginType.LOCKOUT, context.ip_address
        )
        await self.event_sink.publish(LockoutAuth(login=login, device=device))
        return login

    async def find_user_from_payload(
        self, payload: Mapping[str, Any]
    ) -> Optional[AuthenticatableUser]:
        """Resolve a user from the configured login column of the payload."""
        column = self.config.login_column
        if column not in payload:
            return None
        return await self.user_store.find_by_column(column, payload[column])
