"""Unit tests for the login throttle policy."""

from datetime import datetime, timedelta, timezone

import pytest
from freezegun import freeze_time

from src.auth_checker.models.records import LoginRecord
from src.auth_checker.throttle import ThrottlePolicy, should_record_login

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class TestShouldRecordLogin:
    """Pure throttle decision."""

    def test_zero_throttle_always_records(self):
        assert should_record_login(NOW, 0, NOW) is True

    def test_no_previous_login_records(self):
        assert should_record_login(None, 10, NOW) is True

    @pytest.mark.parametrize(
        ("minutes_ago", "expected"),
        [
            (0, False),
            (5, False),
            (9, False),
            (10, True),  # exactly on the boundary is outside the window
            (11, True),
            (60, True),
        ],
    )
    def test_window(self, minutes_ago, expected):
        last = NOW - timedelta(minutes=minutes_ago)
        assert should_record_login(last, 10, NOW) is expected

    def test_naive_timestamps_are_utc(self):
        last = (NOW - timedelta(minutes=5)).replace(tzinfo=None)
        assert should_record_login(last, 10, NOW) is False


class TestThrottlePolicy:
    """ThrottlePolicy with injected and frozen clocks."""

    def test_uses_configured_window(self):
        policy = ThrottlePolicy(throttle_minutes=10, clock=lambda: NOW)
        recent = LoginRecord(
            user_id="u", device_id="d", created_at=NOW - timedelta(minutes=3)
        )
        assert policy.should_record_login(recent) is False
        assert policy.should_record_login(None) is True

    def test_override_window(self):
        policy = ThrottlePolicy(throttle_minutes=10, clock=lambda: NOW)
        recent = LoginRecord(
            user_id="u", device_id="d", created_at=NOW - timedelta(minutes=3)
        )
        assert policy.should_record_login(recent, throttle_minutes=0) is True
        assert policy.should_record_login(recent, throttle_minutes=2) is True

    @freeze_time("2024-01-01 12:00:00")
    def test_default_clock_is_utc_now(self):
        policy = ThrottlePolicy(throttle_minutes=10)
        recent = LoginRecord(
            user_id="u", device_id="d", created_at=NOW - timedelta(minutes=1)
        )
        old = LoginRecord(
            user_id="u", device_id="d", created_at=NOW - timedelta(minutes=30)
        )
        assert policy.should_record_login(recent) is False
        assert policy.should_record_login(old) is True
