"""Tests for the HTTP surface of the FastAPI application."""

from zoneinfo import ZoneInfo

import pytest
from fastapi.testclient import TestClient

from fence import __version__
from fence.api.app import create_app
from fence.auth.adapters.jwt import JWTAuthAdapter

SECRET = "test-secret-key-for-testing-only-0123456789"


@pytest.fixture
def client(settings, store):
    settings.auth_provider = "jwt"
    settings.jwt_secret = SECRET
    app = create_app(settings=settings, store=store)
    with TestClient(app) as client:
        yield client


def bearer(user_id: str, scope: str) -> dict[str, str]:
    token = JWTAuthAdapter(secret_key=SECRET).issue_token(user_id, {"scope": scope})
    return {"Authorization": f"Bearer {token}"}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


def test_timezone_list(client):
    response = client.get("/api/v4/timezone/list/")

    assert response.status_code == 200
    timezones = response.json()
    assert "Europe/Berlin" in timezones
    assert timezones == sorted(timezones)
    assert "Factory" not in timezones
    assert "posixrules" not in timezones
    for name in timezones:
        ZoneInfo(name)


def test_graphql_query_with_token(client):
    response = client.post(
        "/api/v4/graphql",
        json={"query": "{ profile { primaryUsername { value } pronouns { value } } }"},
        headers=bearer("ad|alice", "public"),
    )

    assert response.status_code == 200
    body = response.json()
    assert "errors" not in body
    assert body["data"]["profile"] == {
        "primaryUsername": {"value": "alice"},
        "pronouns": {"value": "they/them"},
    }


def test_graphql_without_token_is_missing_user(client):
    response = client.post(
        "/api/v4/graphql",
        json={"query": '{ profile(username: "alice") { primaryUsername { value } } }'},
    )

    assert response.status_code == 200
    assert response.json()["errors"][0]["extensions"]["code"] == "missing_user"


def test_graphql_mutation(client):
    response = client.post(
        "/api/v4/graphql",
        json={
            "query": "mutation Rename($u: String) { "
            "profile(update: { primaryUsername: { value: $u } }) "
            "{ primaryUsername { value } } }",
            "variables": {"u": "raptor_1"},
        },
        headers=bearer("ad|alice", "staff"),
    )

    assert response.status_code == 200
    assert response.json()["data"]["profile"]["primaryUsername"]["value"] == "raptor_1"
