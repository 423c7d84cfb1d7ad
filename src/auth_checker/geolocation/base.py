"""Geolocation lookup abstract interface.

Lookups resolve a client IP into an enrichment payload stored on the
Login record (``ip_insights``).
"""

from abc import ABC, abstractmethod
from typing import Any


class GeolocationLookup(ABC):
    """Abstract interface for IP geolocation.

    Implementations:
        - MaxMindGeolocationLookup: Local GeoLite2-City database (geoip2)
        - NullGeolocationLookup: Always empty (geolocation disabled)

    Lookups are allowed to raise: the login recorder owns the fail-open
    policy and degrades any exception to an empty payload.
    """

    @abstractmethod
    async def lookup(self, ip_address: str) -> dict[str, Any]:
        """Resolve IP address to an enrichment payload.

        Args:
            ip_address: Client IP address (IPv4 or IPv6)

        Returns:
            JSON-serializable payload, empty when nothing is known

        Raises:
            GeolocationError: If the lookup fails
        """
        pass


class NullGeolocationLookup(GeolocationLookup):
    """Geolocation disabled: every IP resolves to an empty payload."""

    async def lookup(self, ip_address: str) -> dict[str, Any]:
        return {}
