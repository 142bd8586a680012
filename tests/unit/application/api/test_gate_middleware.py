"""Tests for AccessGateMiddleware through the FastAPI app."""

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from hrgate.application.api.rest.app import create_app
from hrgate.config import AccessConfig, Config
from hrgate.domain.access.service.access_gate import AccessGate
from hrgate.domain.shared.error import ConfigurationError


def _page(path: str):
    async def page() -> dict[str, str]:
        return {"page": path}

    return page


def _add_pages(app: FastAPI) -> FastAPI:
    for path in ("/hr/payroll", "/admin/users", "/hrmodules", "/reports", "/login"):
        app.add_api_route(path, _page(path), methods=["GET", "POST"])
    return app


@pytest.fixture
def app() -> FastAPI:
    return _add_pages(create_app(Config()))


def _client(app: FastAPI, **cookies: str) -> TestClient:
    return TestClient(app, cookies=cookies or None, follow_redirects=False)


class TestPassThrough:
    def test_owner_reaches_page(self, app: FastAPI) -> None:
        response = _client(app, token="abc", role="hr").get("/hr/payroll")

        assert response.status_code == 200
        assert response.json() == {"page": "/hr/payroll"}

    def test_higher_rank_reaches_page(self, app: FastAPI) -> None:
        response = _client(app, token="abc", role="ceo").get("/admin/users")
        assert response.status_code == 200

    def test_public_page_without_credentials(self, app: FastAPI) -> None:
        assert _client(app).get("/login").status_code == 200

    def test_paths_outside_matcher_skip_gate(self, app: FastAPI) -> None:
        # Both are owned by a role in the route table but not selected by the matcher
        client = _client(app)
        assert client.get("/hrmodules").status_code == 200
        assert client.get("/reports").status_code == 200

    def test_health_is_public(self, app: FastAPI) -> None:
        response = _client(app).get("/api/v1/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["roles"] == {"employee": 1, "hr": 2, "manager": 3, "admin": 4, "ceo": 5}


class TestRedirects:
    def test_no_token_redirects_to_login(self, app: FastAPI) -> None:
        response = _client(app, role="hr").get("/hr/payroll")

        assert response.status_code == 307
        assert response.headers["location"] == "http://testserver/login"

    def test_low_rank_redirects_to_unauthorized(self, app: FastAPI) -> None:
        response = _client(app, token="abc", role="employee").get("/hr/payroll")

        assert response.status_code == 307
        assert response.headers["location"] == "http://testserver/unauthorized"

    def test_unknown_role_redirects_to_unauthorized(self, app: FastAPI) -> None:
        response = _client(app, token="abc", role="boss").get("/admin/users")
        assert response.headers["location"] == "http://testserver/unauthorized"

    def test_query_string_dropped(self, app: FastAPI) -> None:
        response = _client(app).get("/hr/payroll?month=5")
        assert response.headers["location"] == "http://testserver/login"

    def test_post_redirected_too(self, app: FastAPI) -> None:
        response = _client(app).post("/hr/payroll")
        assert response.status_code == 307

    def test_redirect_status_configurable(self) -> None:
        app = _add_pages(create_app(Config(access=AccessConfig(redirect_status=302))))
        response = _client(app).get("/hr/payroll")
        assert response.status_code == 302

    def test_header_credentials(self, app: FastAPI) -> None:
        client = _client(app)
        response = client.get(
            "/hr/payroll",
            headers={"Authorization": "Bearer abc", "X-User-Role": "manager"},
        )
        assert response.status_code == 200


class TestFailClosed:
    def test_gate_error_denies(self, app: FastAPI, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken(self, path, cookies, headers):
            raise RuntimeError("boom")

        monkeypatch.setattr(AccessGate, "check", broken)

        response = _client(app, token="abc", role="ceo").get("/admin/users")

        assert response.status_code == 307
        assert response.headers["location"] == "http://testserver/unauthorized"


class TestAsyncClient:
    @pytest.mark.asyncio
    async def test_concurrent_requests_decide_independently(self, app: FastAPI) -> None:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://portal") as client:
            allowed = await client.get(
                "/hr/payroll", headers={"Cookie": "token=abc; role=hr"}
            )
            denied = await client.get(
                "/hr/payroll", headers={"Cookie": "token=abc; role=employee"}
            )

        assert allowed.status_code == 200
        assert denied.status_code == 307
        assert denied.headers["location"] == "http://portal/unauthorized"


class TestStartup:
    def test_contradictory_tables_fail_at_startup(self) -> None:
        with pytest.raises(ConfigurationError, match="redirects would loop"):
            create_app(Config(access=AccessConfig(login_path="/hr/login")))

    def test_empty_matcher_fails_at_startup(self) -> None:
        with pytest.raises(ConfigurationError, match="never run"):
            create_app(Config(access=AccessConfig(matcher=[])))
