"""Agent extractor implementation using the user-agents library.

Parses the User-Agent header for platform, browser and device class, and
the Accept-Language header for preferred locales.
"""

import logging

from user_agents import parse as parse_user_agent  # type: ignore[import-untyped]
from user_agents.parsers import UserAgent  # type: ignore[import-untyped]

from ..models.descriptor import (
    AgentDescriptor,
    RequestContext,
    normalize_platform_version,
)
from .base import AgentExtractor

logger = logging.getLogger(__name__)

UNKNOWN_FAMILY = "Other"


def parse_accept_language(header: str | None) -> tuple[str, ...]:
    """Parse an Accept-Language header into locales, most preferred first.

    Entries are ordered by q-weight (default 1.0); ties keep header order.
    "*", q=0 ("not acceptable") and malformed weights are dropped.

    Examples:
        >>> parse_accept_language("fr-CH, fr;q=0.9, en;q=0.8, *;q=0.5")
        ('fr-ch', 'fr', 'en')
        >>> parse_accept_language(None)
        ()
    """
    if not header:
        return ()

    weighted: list[tuple[float, int, str]] = []
    for index, part in enumerate(header.split(",")):
        locale, _, params = part.strip().partition(";")
        locale = locale.strip().lower()
        if not locale or locale == "*":
            continue

        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                continue
        if not quality > 0:
            continue

        weighted.append((-quality, index, locale))

    weighted.sort()
    return tuple(locale for _, _, locale in weighted)


class UserAgentExtractor(AgentExtractor):
    """Agent extractor using the user-agents library.

    Behavior:
        - Fail-open: parse errors yield an "Other"/"Other" descriptor
        - Non-blocking: pure string parsing
        - Tablets count as mobile (device class flags mirror is_pc / is_mobile)
    """

    async def extract(self, context: RequestContext) -> AgentDescriptor:
        languages = parse_accept_language(context.accept_language)

        if not context.user_agent:
            return self._unknown(context, languages)

        try:
            ua: UserAgent = parse_user_agent(context.user_agent)
        except Exception as e:
            logger.warning(
                "Failed to parse user agent",
                extra={"user_agent": context.user_agent[:100], "error": str(e)},
            )
            return self._unknown(context, languages)

        return AgentDescriptor(
            platform=ua.os.family or UNKNOWN_FAMILY,
            platform_version=normalize_platform_version(ua.os.version_string),
            browser=ua.browser.family or UNKNOWN_FAMILY,
            browser_version=ua.browser.version_string or "",
            is_desktop=bool(ua.is_pc),
            is_mobile=bool(ua.is_mobile or ua.is_tablet),
            languages=languages,
            session_fingerprint=context.session_fingerprint,
            ip_address=context.ip_address,
        )

    def _unknown(
        self, context: RequestContext, languages: tuple[str, ...]
    ) -> AgentDescriptor:
        """Descriptor for requests without a usable User-Agent."""
        return AgentDescriptor(
            platform=UNKNOWN_FAMILY,
            browser=UNKNOWN_FAMILY,
            languages=languages,
            session_fingerprint=context.session_fingerprint,
            ip_address=context.ip_address,
        )
