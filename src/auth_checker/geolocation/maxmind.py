"""IP geolocation using MaxMind GeoLite2.

Resolves IP addresses with a local GeoLite2-City database: no external
API calls, no rate limits, city-level precision only.

License:
- GeoLite2 database: CC BY-SA 4.0
- Requires MaxMind account (free)
- Cannot redistribute database file
"""

import ipaddress
import logging
from pathlib import Path
from typing import Any

import geoip2.database
import geoip2.errors

from ..errors import GeolocationError
from .base import GeolocationLookup

logger = logging.getLogger(__name__)


class MaxMindGeolocationLookup(GeolocationLookup):
    """Geolocation lookup backed by a GeoLite2-City database.

    Behavior:
        - Private/reserved IPs: empty payload, no lookup
        - IP not in database: empty payload
        - Missing database file or reader errors: GeolocationError
        - Lazy loading: reader opened on first lookup

    Args:
        db_path: Path to GeoLite2-City.mmdb file
        reader: Pre-built geoip2 reader (tests inject a fake)
    """

    def __init__(
        self,
        db_path: Path | str | None = None,
        reader: Any | None = None,
    ) -> None:
        self.db_path = Path(db_path) if db_path else None
        self._reader = reader

    async def lookup(self, ip_address: str) -> dict[str, Any]:
        """Resolve IP address to city/country/coordinates.

        Args:
            ip_address: Client IP address (IPv4 or IPv6)

        Returns:
            Payload with location, city, region, country, country_code,
            latitude, longitude and timezone (missing values omitted)

        Raises:
            GeolocationError: If the database is unavailable or the lookup fails
        """
        if self._is_private_ip(ip_address):
            return {}

        reader = self._get_reader()

        try:
            response = reader.city(ip_address)
        except geoip2.errors.AddressNotFoundError:
            logger.debug(f"IP address not found in GeoLite2: {ip_address}")
            return {}
        except Exception as e:
            raise GeolocationError(
                "GeoIP lookup failed",
                details={"ip_address": ip_address, "error": str(e)},
            ) from e

        city = response.city.name or None
        country_code = response.country.iso_code or None

        location = None
        if city and country_code:
            location = f"{city}, {country_code}"
        elif country_code:
            location = country_code

        payload = {
            "location": location,
            "city": city,
            "region": response.subdivisions.most_specific.name or None,
            "country": response.country.name or None,
            "country_code": country_code,
            "latitude": response.location.latitude,
            "longitude": response.location.longitude,
            "timezone": response.location.time_zone or None,
        }
        return {key: value for key, value in payload.items() if value is not None}

    def _get_reader(self) -> Any:
        """Open the GeoIP2 reader on first use.

        Raises:
            GeolocationError: If the database path is missing or unreadable
        """
        if self._reader is not None:
            return self._reader

        if self.db_path is None or not self.db_path.exists():
            raise GeolocationError(
                "GeoLite2 database not found",
                details={"db_path": str(self.db_path)},
            )

        try:
            self._reader = geoip2.database.Reader(str(self.db_path))
        except Exception as e:
            raise GeolocationError(
                "Failed to open GeoLite2 database",
                details={"db_path": str(self.db_path), "error": str(e)},
            ) from e

        logger.info(f"GeoLite2 database loaded from {self.db_path}")
        return self._reader

    def _is_private_ip(self, ip_address: str) -> bool:
        """Check if IP address is private/reserved (no meaningful location).

        Invalid addresses count as private, so they are never looked up.
        """
        try:
            ip = ipaddress.ip_address(ip_address)
        except ValueError:
            return True
        return (
            ip.is_private
            or ip.is_loopback
            or ip.is_reserved
            or ip.is_link_local
            or ip.is_multicast
        )

    def close(self) -> None:
        """Close the database reader, if open."""
        if self._reader is not None:
            self._reader.close()
            self._reader = None
