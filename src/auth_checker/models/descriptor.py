"""Request-derived value objects.

RequestContext carries the raw request metadata an adapter (FastAPI
middleware, test, CLI) hands to the package. AgentDescriptor is what the
agent extractor makes of it and what the device matcher compares against.
Neither is persisted.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

UNKNOWN_VERSION = "0"
"""Sentinel stored and compared when a platform version cannot be parsed."""


def normalize_platform_version(version: str | None) -> str:
    """Map an empty or missing platform version to the "0" sentinel."""
    return version if version else UNKNOWN_VERSION


@dataclass(frozen=True, slots=True, kw_only=True)
class RequestContext:
    """Raw request metadata for one authentication event.

    Attributes:
        user_agent: User-Agent header value.
        accept_language: Accept-Language header value.
        ip_address: Client IP address (resolved by the caller).
        session_fingerprint: Opaque fingerprint bound to the client session.
        headers: Any other headers an extractor may use.
    """

    user_agent: str | None = None
    accept_language: str | None = None
    ip_address: str | None = None
    session_fingerprint: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True, kw_only=True)
class AgentDescriptor:
    """Structured description of the client that sent a request.

    Attributes:
        platform: OS family ("Mac OS X", "Windows", "Other" when unknown).
        platform_version: OS version, normalized to "0" when unknown.
        browser: Browser family ("Chrome", "Other" when unknown).
        browser_version: Browser version, "" when unknown.
        is_desktop: Desktop class device.
        is_mobile: Mobile class device.
        languages: Preferred locales, most preferred first.
        session_fingerprint: Opaque session fingerprint, may be None.
        ip_address: Client IP, used by the "ip" matching attribute.
    """

    platform: str
    platform_version: str = UNKNOWN_VERSION
    browser: str
    browser_version: str = ""
    is_desktop: bool = False
    is_mobile: bool = False
    languages: tuple[str, ...] = ()
    session_fingerprint: str | None = None
    ip_address: str | None = None

    @property
    def language(self) -> str | None:
        """First preferred locale, or None when the client sent none."""
        return self.languages[0] if self.languages else None
