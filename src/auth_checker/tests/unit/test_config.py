"""Unit tests for AuthCheckerConfig and AuthCheckerSettings."""

import pytest

from src.auth_checker.models.config import (
    DEFAULT_CONFIG,
    DEFAULT_MATCHING_ATTRIBUTES,
    DEVELOPMENT_CONFIG,
    TESTING_CONFIG,
    AuthCheckerConfig,
)
from src.auth_checker.models.settings import AuthCheckerSettings


class TestAuthCheckerConfig:
    """Defaults and validation."""

    def test_defaults(self):
        config = AuthCheckerConfig()

        assert config.device_matching_attributes == frozenset(
            {"platform", "platform_version", "browser", "browser_version", "fingerprint"}
        )
        assert config.throttle == 0
        assert config.login_column == "email"
        assert config.storage_type == "database"
        assert config.geolocation_type == "none"
        assert config.trust_forwarded_ip is False

    def test_attributes_accept_any_iterable(self):
        config = AuthCheckerConfig(device_matching_attributes=["platform", "ip"])
        assert config.device_matching_attributes == frozenset({"platform", "ip"})

    def test_empty_attribute_set_allowed(self):
        config = AuthCheckerConfig(device_matching_attributes=set())
        assert config.device_matching_attributes == frozenset()

    def test_unknown_attribute_rejected(self):
        with pytest.raises(ValueError, match="Unknown device matching attributes"):
            AuthCheckerConfig(device_matching_attributes={"platform", "gpu"})

    def test_negative_throttle_rejected(self):
        with pytest.raises(ValueError, match="throttle must be zero or positive"):
            AuthCheckerConfig(throttle=-1)

    def test_empty_login_column_rejected(self):
        with pytest.raises(ValueError, match="login_column must not be empty"):
            AuthCheckerConfig(login_column="")

    def test_maxmind_requires_db_path(self):
        with pytest.raises(ValueError, match="geoip_db_path is required"):
            AuthCheckerConfig(geolocation_type="maxmind")

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.throttle = 5  # type: ignore[misc]

    def test_presets(self):
        assert DEFAULT_CONFIG.device_matching_attributes == DEFAULT_MATCHING_ATTRIBUTES
        assert DEVELOPMENT_CONFIG.storage_type == "memory"
        assert TESTING_CONFIG.storage_type == "memory"
        assert TESTING_CONFIG.throttle == 0


class TestAuthCheckerSettings:
    """Environment loading via pydantic-settings."""

    def test_defaults_build_default_config(self, monkeypatch):
        for name in (
            "AUTH_CHECKER_DEVICE_MATCHING_ATTRIBUTES",
            "AUTH_CHECKER_THROTTLE",
            "AUTH_CHECKER_LOGIN_COLUMN",
            "AUTH_CHECKER_STORAGE_TYPE",
            "AUTH_CHECKER_GEOLOCATION_TYPE",
            "AUTH_CHECKER_GEOIP_DB_PATH",
            "AUTH_CHECKER_TRUST_FORWARDED_IP",
        ):
            monkeypatch.delenv(name, raising=False)

        config = AuthCheckerSettings(_env_file=None).to_config()

        assert config == AuthCheckerConfig()

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv(
            "AUTH_CHECKER_DEVICE_MATCHING_ATTRIBUTES", " platform , browser,ip "
        )
        monkeypatch.setenv("AUTH_CHECKER_THROTTLE", "15")
        monkeypatch.setenv("AUTH_CHECKER_LOGIN_COLUMN", "username")
        monkeypatch.setenv("AUTH_CHECKER_STORAGE_TYPE", "memory")
        monkeypatch.setenv("AUTH_CHECKER_TRUST_FORWARDED_IP", "true")

        config = AuthCheckerSettings(_env_file=None).to_config()

        assert config.device_matching_attributes == frozenset(
            {"platform", "browser", "ip"}
        )
        assert config.throttle == 15
        assert config.login_column == "username"
        assert config.storage_type == "memory"
        assert config.trust_forwarded_ip is True

    def test_empty_attribute_list_means_match_everything(self, monkeypatch):
        monkeypatch.setenv("AUTH_CHECKER_DEVICE_MATCHING_ATTRIBUTES", "")

        config = AuthCheckerSettings(_env_file=None).to_config()

        assert config.device_matching_attributes == frozenset()

    def test_negative_throttle_rejected(self, monkeypatch):
        monkeypatch.setenv("AUTH_CHECKER_THROTTLE", "-5")

        with pytest.raises(ValueError):
            AuthCheckerSettings(_env_file=None)

    def test_unknown_attribute_rejected_on_conversion(self, monkeypatch):
        monkeypatch.setenv("AUTH_CHECKER_DEVICE_MATCHING_ATTRIBUTES", "platform,gpu")

        settings = AuthCheckerSettings(_env_file=None)

        with pytest.raises(ValueError, match="Unknown device matching attributes"):
            settings.to_config()
