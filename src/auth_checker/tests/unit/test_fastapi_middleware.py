"""Unit tests for the FastAPI adapter."""

from dataclasses import replace

from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from src.auth_checker.factory import get_auth_checker_for_testing
from src.auth_checker.middleware.fastapi_middleware import (
    AuthCheckerMiddleware,
    build_request_context,
    get_auth_checker_service,
)
from src.auth_checker.models.config import TESTING_CONFIG
from src.auth_checker.service import AuthCheckerService
from src.auth_checker.tests.fixtures.mock_models import CHROME_MAC_UA, MockUser


def create_app(factory, trust_forwarded_ip=None) -> FastAPI:
    app = FastAPI()
    app.add_middleware(AuthCheckerMiddleware, auth_checker_factory=factory)

    @app.get("/context")
    async def context(request: Request):
        ctx = build_request_context(request, trust_forwarded_ip=trust_forwarded_ip)
        return {
            "user_agent": ctx.user_agent,
            "accept_language": ctx.accept_language,
            "ip_address": ctx.ip_address,
            "session_fingerprint": ctx.session_fingerprint,
        }

    @app.post("/login")
    async def login(
        request: Request,
        checker: AuthCheckerService = Depends(get_auth_checker_service),
    ):
        user = MockUser(email="alice@example.com")
        record = await checker.on_login(user, build_request_context(request))
        return {
            "type": record.type.value,
            "ip_address": record.ip_address,
            "device_count": checker.storage.device_count(),
        }

    return app


async def memory_checker_factory():
    return get_auth_checker_for_testing()


async def proxied_checker_factory():
    return get_auth_checker_for_testing(
        config=replace(TESTING_CONFIG, trust_forwarded_ip=True)
    )


async def failing_factory():
    raise RuntimeError("database unavailable")


class TestBuildRequestContext:
    def test_headers_and_client_fingerprint(self):
        client = TestClient(create_app(memory_checker_factory))

        response = client.get(
            "/context",
            headers={
                "User-Agent": CHROME_MAC_UA,
                "Accept-Language": "en-US,en;q=0.9",
                "X-Device-Fingerprint": "client-fp",
            },
        )

        body = response.json()
        assert body["user_agent"] == CHROME_MAC_UA
        assert body["accept_language"] == "en-US,en;q=0.9"
        assert body["session_fingerprint"] == "client-fp"
        assert body["ip_address"] == "testclient"

    def test_fallback_fingerprint(self):
        client = TestClient(create_app(memory_checker_factory))

        response = client.get("/context", headers={"User-Agent": CHROME_MAC_UA})

        assert len(response.json()["session_fingerprint"]) == 64

    def test_forwarded_ip_ignored_by_default(self):
        client = TestClient(create_app(memory_checker_factory))

        response = client.get(
            "/context", headers={"X-Forwarded-For": "81.2.69.142, 10.0.0.1"}
        )

        assert response.json()["ip_address"] == "testclient"

    def test_forwarded_ip_when_trusted(self):
        client = TestClient(create_app(memory_checker_factory, trust_forwarded_ip=True))

        response = client.get(
            "/context", headers={"X-Forwarded-For": "81.2.69.142, 10.0.0.1"}
        )

        assert response.json()["ip_address"] == "81.2.69.142"


class TestAuthCheckerMiddleware:
    def test_service_injected(self):
        client = TestClient(create_app(memory_checker_factory))

        response = client.post("/login", headers={"User-Agent": CHROME_MAC_UA})

        assert response.status_code == 200
        assert response.json() == {
            "type": "login",
            "ip_address": "testclient",
            "device_count": 1,
        }

    def test_factory_failure_surfaces_in_dependency(self):
        client = TestClient(create_app(failing_factory), raise_server_exceptions=False)

        response = client.post("/login", headers={"User-Agent": CHROME_MAC_UA})

        assert response.status_code == 500


class TestTrustForwardedIpFromConfig:
    """The service's config decides when no explicit flag is passed."""

    def test_context_uses_config(self):
        client = TestClient(create_app(proxied_checker_factory))

        response = client.get(
            "/context", headers={"X-Forwarded-For": "81.2.69.142, 10.0.0.1"}
        )

        assert response.json()["ip_address"] == "81.2.69.142"

    def test_login_records_forwarded_ip(self):
        client = TestClient(create_app(proxied_checker_factory))

        response = client.post(
            "/login",
            headers={"User-Agent": CHROME_MAC_UA, "X-Forwarded-For": "81.2.69.142"},
        )

        assert response.json()["ip_address"] == "81.2.69.142"

    def test_explicit_flag_overrides_config(self):
        client = TestClient(
            create_app(proxied_checker_factory, trust_forwarded_ip=False)
        )

        response = client.get("/context", headers={"X-Forwarded-For": "81.2.69.142"})

        assert response.json()["ip_address"] == "testclient"

    def test_no_service_means_untrusted(self):
        client = TestClient(create_app(failing_factory))

        response = client.get("/context", headers={"X-Forwarded-For": "81.2.69.142"})

        assert response.json()["ip_address"] == "testclient"
