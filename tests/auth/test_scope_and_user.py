"""Tests for deriving ScopeAndUser from request headers."""

import pytest

from fence.auth.adapters.jwt import JWTAuthAdapter
from fence.auth.adapters.none import NoAuthAdapter
from fence.auth.context import ScopeAndUser
from fence.auth.factory import get_auth_adapter
from fence.auth.middleware import get_scope_and_user
from fence.config import Settings

SECRET = "test-secret-key-for-testing-only-0123456789"


@pytest.fixture
def jwt_adapter():
    return JWTAuthAdapter(secret_key=SECRET)


class TestGetScopeAndUser:
    @pytest.mark.asyncio
    async def test_valid_token(self, jwt_adapter):
        token = jwt_adapter.issue_token("ad|alice", {"scope": "staff"})

        result = await get_scope_and_user(f"Bearer {token}", jwt_adapter)

        assert result == ScopeAndUser(user_id="ad|alice", scope="staff")

    @pytest.mark.asyncio
    async def test_custom_scope_claim(self, jwt_adapter):
        token = jwt_adapter.issue_token("ad|alice", {"https://dinopark/scope": "ndaed"})

        result = await get_scope_and_user(
            f"Bearer {token}", jwt_adapter, scope_claim="https://dinopark/scope"
        )

        assert result.scope == "ndaed"

    @pytest.mark.asyncio
    async def test_missing_scope_claim_is_public(self, jwt_adapter):
        token = jwt_adapter.issue_token("ad|alice")

        result = await get_scope_and_user(f"Bearer {token}", jwt_adapter)

        assert result.scope == "public"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer ", "Bearer not-a-jwt"])
    async def test_unauthenticated(self, jwt_adapter, header):
        assert await get_scope_and_user(header, jwt_adapter) is None

    @pytest.mark.asyncio
    async def test_no_auth_adapter(self):
        adapter = NoAuthAdapter(default_user_id="ad|dev", default_scope="private")

        result = await get_scope_and_user("Bearer anything", adapter)

        assert result == ScopeAndUser(user_id="ad|dev", scope="private")


class TestGetAuthAdapter:
    def test_none_provider(self):
        adapter = get_auth_adapter(
            Settings(auth_provider="none", auth_config={"default_user_id": "ad|dev"})
        )

        assert isinstance(adapter, NoAuthAdapter)
        assert adapter.default_user_id == "ad|dev"

    def test_jwt_provider(self):
        adapter = get_auth_adapter(Settings(auth_provider="jwt", jwt_secret=SECRET))

        assert isinstance(adapter, JWTAuthAdapter)
        assert adapter.secret_key == SECRET

    def test_jwt_provider_requires_secret(self):
        with pytest.raises(ValueError, match="JWT secret key is required"):
            get_auth_adapter(Settings(auth_provider="jwt", jwt_secret=None))

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unsupported auth provider"):
            get_auth_adapter(Settings(auth_provider="kerberos"))

    def test_no_auth_refused_in_production(self, monkeypatch):
        monkeypatch.setenv("FENCE_ENVIRONMENT", "production")

        with pytest.raises(RuntimeError):
            NoAuthAdapter()
