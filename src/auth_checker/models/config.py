"""Auth checker configuration models.

This module provides the type-safe configuration for the auth checker
package: which device attributes must match, the login throttle window,
the user column used to resolve lockouts, and adapter selection.

Configuration can be provided via:
- Direct instantiation (for testing)
- Environment variables (see models/settings.py)
"""

from dataclasses import dataclass, field
from typing import Literal, Optional

MATCHABLE_ATTRIBUTES = frozenset(
    {
        "platform",
        "platform_version",
        "browser",
        "browser_version",
        "fingerprint",
        "language",
        "ip",
    }
)

DEFAULT_MATCHING_ATTRIBUTES = frozenset(
    {"platform", "platform_version", "browser", "browser_version", "fingerprint"}
)

# Attribute set used by earlier deployments that matched on client IP
# instead of the session fingerprint.
LEGACY_MATCHING_ATTRIBUTES = frozenset({"ip", "platform", "platform_version", "browser"})


@dataclass(frozen=True)
class AuthCheckerConfig:
    """Auth checker configuration.

    Attributes:
        device_matching_attributes: Attributes that must ALL be equal for a
            stored device to match a request. An empty set matches every
            device (each user ends up with a single device).
        throttle: Minutes during which repeat successful logins from the
            same device are not recorded (0 = record every login).
        login_column: User column holding the value lockout payloads carry.
        storage_type: Storage backend ("database", "memory").
        geolocation_type: IP geolocation adapter ("maxmind", "none").
        geoip_db_path: Path to GeoLite2-City.mmdb (maxmind only).
        trust_forwarded_ip: Trust X-Forwarded-For when resolving client IP.

    Example:
        >>> config = AuthCheckerConfig(throttle=10, storage_type="memory")
        >>> "fingerprint" in config.device_matching_attributes
        True
    """

    device_matching_attributes: frozenset[str] = field(
        default=DEFAULT_MATCHING_ATTRIBUTES
    )
    throttle: int = 0
    login_column: str = "email"

    storage_type: Literal["database", "memory"] = "database"
    geolocation_type: Literal["maxmind", "none"] = "none"
    geoip_db_path: Optional[str] = None

    trust_forwarded_ip: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization.

        Raises:
            ValueError: If configuration is invalid
        """
        # Accept any iterable of names (list from settings, set from callers)
        object.__setattr__(
            self,
            "device_matching_attributes",
            frozenset(self.device_matching_attributes),
        )

        unknown = self.device_matching_attributes - MATCHABLE_ATTRIBUTES
        if unknown:
            raise ValueError(
                f"Unknown device matching attributes: {sorted(unknown)}. "
                f"Must be a subset of {sorted(MATCHABLE_ATTRIBUTES)}"
            )
        if self.throttle < 0:
            raise ValueError("throttle must be zero or positive")
        if not self.login_column:
            raise ValueError("login_column must not be empty")
        if self.geolocation_type == "maxmind" and not self.geoip_db_path:
            raise ValueError("geoip_db_path is required for 'maxmind' geolocation")


# Default configurations for common scenarios

DEFAULT_CONFIG = AuthCheckerConfig()

DEVELOPMENT_CONFIG = AuthCheckerConfig(
    storage_type="memory",  # Fast in-memory storage
    geolocation_type="none",  # No GeoIP database in dev
)

TESTING_CONFIG = AuthCheckerConfig(
    storage_type="memory",
    geolocation_type="none",
    throttle=0,  # Every login recorded, deterministic tests
)
