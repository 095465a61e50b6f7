"""Auth and CORS middleware tests."""

from unittest.mock import Mock

import falcon
import falcon.asgi
import pytest
from falcon.testing import TestClient

from perioscan.infrastructure.auth.keycloak_provider import OIDCUser
from perioscan.interfaces.api.middleware.auth import AuthMiddleware
from perioscan.interfaces.api.middleware.cors import CORSMiddleware


class _WhoAmI:
    async def on_get(self, req, resp):
        user = req.context.user
        resp.media = {"user": user.user_id if user else None, "role": user.role if user else None}


@pytest.fixture
def keycloak():
    provider = Mock()
    provider.decode_token.side_effect = lambda token: (
        OIDCUser(user_id="u1", email="x@y.com", name="Dr. X", realm_roles=["perito"])
        if token == "good"
        else None
    )
    return provider


@pytest.fixture
def client(keycloak) -> TestClient:
    app = falcon.asgi.App(
        middleware=[CORSMiddleware(["https://app.example"]), AuthMiddleware(keycloak)]
    )
    app.add_route("/whoami", _WhoAmI())
    return TestClient(app)


def test_valid_bearer_sets_user(client) -> None:
    result = client.simulate_get("/whoami", headers={"Authorization": "Bearer good"})
    assert result.json == {"user": "u1", "role": "perito"}


@pytest.mark.parametrize("header", [None, "Bearer bad", "Basic dXNlcjpwdw=="])
def test_missing_or_invalid_token_is_anonymous(client, header) -> None:
    headers = {"Authorization": header} if header else {}
    result = client.simulate_get("/whoami", headers=headers)
    assert result.json == {"user": None, "role": None}


def test_no_provider_is_anonymous() -> None:
    app = falcon.asgi.App(middleware=[AuthMiddleware(None)])
    app.add_route("/whoami", _WhoAmI())
    result = TestClient(app).simulate_get("/whoami", headers={"Authorization": "Bearer good"})
    assert result.json["user"] is None


def test_cors_allowed_origin(client) -> None:
    result = client.simulate_get("/whoami", headers={"Origin": "https://app.example"})
    assert result.headers["access-control-allow-origin"] == "https://app.example"


def test_cors_unknown_origin(client) -> None:
    result = client.simulate_get("/whoami", headers={"Origin": "https://evil.example"})
    assert "access-control-allow-origin" not in result.headers


def test_cors_preflight(client) -> None:
    result = client.simulate_options("/whoami", headers={"Origin": "https://app.example"})
    assert result.status_code == 204
    assert "PATCH" in result.headers["access-control-allow-methods"]
