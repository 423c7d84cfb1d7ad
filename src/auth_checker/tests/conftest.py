"""Pytest fixtures for auth checker package tests."""

from unittest.mock import MagicMock

import pytest

from src.auth_checker.models.descriptor import AgentDescriptor, RequestContext
from src.auth_checker.storage.memory import MemoryAuthCheckerStorage
from src.auth_checker.tests.fixtures.mock_models import (
    CHROME_MAC_UA,
    SAFARI_IPHONE_UA,
    MockUser,
    RecordingEventSink,
)


@pytest.fixture
def user():
    """Fixture: user with the default login column populated."""
    return MockUser(email="alice@example.com", username="alice")


@pytest.fixture
def mock_logger():
    """Fixture: logger double (LoggerProtocol)."""
    return MagicMock()


@pytest.fixture
def event_sink():
    """Fixture: event sink recording published events."""
    return RecordingEventSink()


@pytest.fixture
def memory_storage():
    """Fixture: empty in-memory storage."""
    return MemoryAuthCheckerStorage()


@pytest.fixture
def chrome_mac_context():
    """Fixture: request context of Chrome on macOS."""
    return RequestContext(
        user_agent=CHROME_MAC_UA,
        accept_language="en-US,en;q=0.9",
        ip_address="203.0.113.10",
        session_fingerprint="fp-mac-1",
    )


@pytest.fixture
def iphone_context():
    """Fixture: request context of Safari on iPhone."""
    return RequestContext(
        user_agent=SAFARI_IPHONE_UA,
        accept_language="fr-FR,fr;q=0.8",
        ip_address="198.51.100.7",
        session_fingerprint="fp-iphone-1",
    )


@pytest.fixture
def mac_descriptor():
    """Fixture: descriptor equivalent to chrome_mac_context."""
    return AgentDescriptor(
        platform="Mac OS X",
        platform_version="10.15.7",
        browser="Chrome",
        browser_version="120.0.0",
        is_desktop=True,
        languages=("en-us", "en"),
        session_fingerprint="fp-mac-1",
        ip_address="203.0.113.10",
    )
