"""Auth checker error types.

Only failures that the caller must see are raised. Geolocation errors are
raised by lookup adapters but always caught by the login recorder.
"""

from typing import Any


class AuthCheckerError(Exception):
    """Base error for the auth checker package.

    Attributes:
        message: Human-readable error message.
        details: Optional structured context for logging.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class PersistenceError(AuthCheckerError):
    """Device or login write/read failed.

    Raised by storage adapters. Never caught inside the package, so the
    outer authentication flow sees it and no event is emitted.
    """


class GeolocationError(AuthCheckerError):
    """IP geolocation lookup failed (network, database, quota)."""
