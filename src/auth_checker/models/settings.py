"""Environment-driven settings for the auth checker.

Loads AuthCheckerConfig values from environment variables prefixed with
``AUTH_CHECKER_`` using Pydantic Settings.

Example environment:
    AUTH_CHECKER_THROTTLE=10
    AUTH_CHECKER_LOGIN_COLUMN=username
    AUTH_CHECKER_DEVICE_MATCHING_ATTRIBUTES=platform,browser,fingerprint
    AUTH_CHECKER_GEOLOCATION_TYPE=maxmind
    AUTH_CHECKER_GEOIP_DB_PATH=/data/GeoLite2-City.mmdb
    AUTH_CHECKER_DATABASE_URL=postgresql+asyncpg://app:secret@db/app
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import DEFAULT_MATCHING_ATTRIBUTES, AuthCheckerConfig


class AuthCheckerSettings(BaseSettings):
    """Auth checker settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="AUTH_CHECKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    device_matching_attributes: str = Field(
        default=",".join(sorted(DEFAULT_MATCHING_ATTRIBUTES)),
        description="Comma-separated attributes that must all match (empty = always match)",
    )
    throttle: int = Field(
        default=0,
        ge=0,
        description="Minutes between recorded logins from the same device (0 = disabled)",
    )
    login_column: str = Field(
        default="email",
        description="User column used to resolve lockout payloads",
    )
    storage_type: str = Field(default="database", description="database or memory")
    geolocation_type: str = Field(default="none", description="maxmind or none")
    geoip_db_path: str | None = Field(
        default=None,
        description="Path to GeoLite2-City.mmdb database file",
    )
    trust_forwarded_ip: bool = Field(
        default=False,
        description="Trust X-Forwarded-For when resolving the client IP",
    )
    database_url: str = Field(
        default="sqlite+aiosqlite:///./auth_checker.db",
        description="Async SQLAlchemy URL (used by Alembic migrations)",
    )

    @field_validator("device_matching_attributes")
    @classmethod
    def normalize_attributes(cls, v: str) -> str:
        """Strip whitespace around each comma-separated attribute."""
        return ",".join(part.strip() for part in v.split(",") if part.strip())

    def to_config(self) -> AuthCheckerConfig:
        """Build the validated AuthCheckerConfig.

        Raises:
            ValueError: If the resulting configuration is invalid.
        """
        attributes = (
            self.device_matching_attributes.split(",")
            if self.device_matching_attributes
            else []
        )
        return AuthCheckerConfig(
            device_matching_attributes=frozenset(attributes),
            throttle=self.throttle,
            login_column=self.login_column,
            storage_type=self.storage_type,  # type: ignore[arg-type]
            geolocation_type=self.geolocation_type,  # type: ignore[arg-type]
            geoip_db_path=self.geoip_db_path,
            trust_forwarded_ip=self.trust_forwarded_ip,
        )


@lru_cache
def get_settings() -> AuthCheckerSettings:
    """Get cached settings instance."""
    return AuthCheckerSettings()
