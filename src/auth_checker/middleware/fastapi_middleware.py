"""FastAPI adapter for the auth checker.

Provides:
    - build_request_context(): FastAPI Request -> RequestContext
    - AuthCheckerMiddleware: attaches an AuthCheckerService to request.state
    - get_auth_checker_service(): dependency reading it back

This is a FRAMEWORK ADAPTER. The rest of the package never imports FastAPI.

Usage:
    app = FastAPI()
    app.add_middleware(AuthCheckerMiddleware, auth_checker_factory=create_checker)

    @app.post("/auth/login")
    async def login(
        request: Request,
        checker: AuthCheckerService = Depends(get_auth_checker_service),
    ):
        user = await authenticate(...)
        await checker.on_login(user, build_request_context(request))
"""

import logging
from typing import Awaitable, Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from ..agent.fingerprint import generate_device_fingerprint
from ..models.descriptor import RequestContext
from ..service import AuthCheckerService

logger = logging.getLogger(__name__)

FINGERPRINT_HEADER = "x-device-fingerprint"


def resolve_client_ip(request: Request, trust_forwarded_ip: bool = False) -> str | None:
    """Client IP from the connection, or the first X-Forwarded-For hop.

    Args:
        request: FastAPI Request object
        trust_forwarded_ip: Honour X-Forwarded-For (only behind a trusted proxy)
    """
    if trust_forwarded_ip:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            first_hop = forwarded.split(",")[0].strip()
            if first_hop:
                return first_hop
    return request.client.host if request.client else None


def build_request_context(
    request: Request, trust_forwarded_ip: bool | None = None
) -> RequestContext:
    """Build a RequestContext from an incoming request.

    The session fingerprint is taken from the X-Device-Fingerprint header;
    without it a SHA256 fingerprint is derived from request metadata.

    Args:
        request: FastAPI Request object
        trust_forwarded_ip: Honour X-Forwarded-For. None reads
            config.trust_forwarded_ip of the service AuthCheckerMiddleware
            attached (False without one).
    """
    if trust_forwarded_ip is None:
        checker = getattr(request.state, "auth_checker", None)
        trust_forwarded_ip = bool(checker and checker.config.trust_forwarded_ip)

    headers = {key.lower(): value for key, value in request.headers.items()}
    user_agent = headers.get("user-agent")
    accept_language = headers.get("accept-language")

    fingerprint = headers.get(FINGERPRINT_HEADER) or generate_device_fingerprint(
        user_agent, accept_language, headers
    )

    return RequestContext(
        user_agent=user_agent,
        accept_language=accept_language,
        ip_address=resolve_client_ip(request, trust_forwarded_ip),
        session_fingerprint=fingerprint,
        headers=headers,
    )


class AuthCheckerMiddleware(BaseHTTPMiddleware):
    """Middleware that adds an AuthCheckerService to request state.

    Attributes:
        auth_checker_factory: Async factory creating AuthCheckerService
            instances, called once per request.
    """

    def __init__(
        self,
        app,
        auth_checker_factory: Callable[[], Awaitable[AuthCheckerService]],
    ):
        super().__init__(app)
        self.auth_checker_factory = auth_checker_factory

    async def dispatch(self, request: Request, call_next):
        """Attach the service, then continue the request."""
        try:
            request.state.auth_checker = await self.auth_checker_factory()
        except Exception as e:
            # Endpoints decide whether a missing checker is fatal
            logger.error(
                f"Failed to create AuthChecker for request: {e}",
                exc_info=True,
            )
            request.state.auth_checker = None

        return await call_next(request)


def get_auth_checker_service(request: Request) -> AuthCheckerService:
    """Dependency function to inject AuthCheckerService into endpoints.

    Raises:
        RuntimeError: If AuthCheckerMiddleware is not configured
    """
    checker = getattr(request.state, "auth_checker", None)

    if checker is None:
        raise RuntimeError(
            "AuthChecker not found in request state. "
            "Did you forget to add AuthCheckerMiddleware?"
        )

    return checker
