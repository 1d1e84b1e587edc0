"""
End-to-end tests executing GraphQL documents against the schema
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from fence.auth.context import ScopeAndUser
from fence.graphql.schema import build_context, schema, validate_schema
from fence.store.base import GetBy

PROFILE_QUERY = """
query Profile($username: String, $viewAs: Display) {
    profile(username: $username, viewAs: $viewAs) {
        userId { value }
        primaryUsername { value display }
        funTitle { value }
        location { value display }
        pronouns { value }
    }
}
"""

UPDATE_MUTATION = """
mutation Update($update: InputProfile!) {
    profile(update: $update) {
        primaryUsername { value publisher }
        funTitle { value display }
    }
}
"""


@pytest.fixture
def notifier():
    return MagicMock(notify=AsyncMock(return_value=True))


@pytest.fixture
def make_context(store, settings, notifier):
    def _make(scope_and_user):
        return {"scope_and_user": scope_and_user, **build_context(store, settings, notifier)}

    return _make


def test_validate_schema():
    validate_schema()


def test_schema_surface():
    sdl = str(schema)

    assert "profile(username: String = null, viewAs: Display = null): Profile!" in sdl
    assert "profile(update: InputProfile!): Profile!" in sdl
    assert "enum Display" in sdl


class TestProfileQuery:
    @pytest.mark.asyncio
    async def test_self_view_returns_private_fields(self, make_context):
        result = await schema.execute(
            PROFILE_QUERY,
            context_value=make_context(ScopeAndUser("ad|alice", "public")),
        )

        assert result.errors is None
        profile = result.data["profile"]
        assert profile["userId"]["value"] == "ad|alice"
        assert profile["pronouns"]["value"] == "they/them"
        assert profile["location"]["value"] == "Berlin"

    @pytest.mark.asyncio
    async def test_view_as_above_scope_is_downgraded(self, make_context):
        result = await schema.execute(
            PROFILE_QUERY,
            variable_values={"username": "alice", "viewAs": "AUTHENTICATED"},
            context_value=make_context(ScopeAndUser("ad|bob", "public")),
        )

        assert result.errors is None
        profile = result.data["profile"]
        assert profile["primaryUsername"] == {"value": "alice", "display": "PUBLIC"}
        assert profile["funTitle"]["value"] is None
        assert profile["location"] == {"value": None, "display": "STAFF"}

    @pytest.mark.asyncio
    async def test_other_user_at_scope(self, make_context):
        result = await schema.execute(
            PROFILE_QUERY,
            variable_values={"username": "alice"},
            context_value=make_context(ScopeAndUser("ad|bob", "staff")),
        )

        assert result.errors is None
        assert result.data["profile"]["location"]["value"] == "Berlin"
        assert result.data["profile"]["pronouns"]["value"] is None

    @pytest.mark.asyncio
    async def test_unknown_username(self, make_context):
        result = await schema.execute(
            PROFILE_QUERY,
            variable_values={"username": "ghost"},
            context_value=make_context(ScopeAndUser("ad|bob", "staff")),
        )

        assert result.data is None
        assert result.errors[0].extensions["code"] == "not_found"

    @pytest.mark.asyncio
    async def test_unauthenticated(self, make_context):
        result = await schema.execute(PROFILE_QUERY, context_value=make_context(None))

        assert result.errors[0].message == "no user in query or scope"
        assert result.errors[0].extensions == {
            "code": "missing_user",
            "internal_error": "no user in query or scope: ?!",
        }


class TestProfileMutation:
    @pytest.mark.asyncio
    async def test_update(self, make_context, notifier):
        result = await schema.execute(
            UPDATE_MUTATION,
            variable_values={
                "update": {
                    "primaryUsername": {"value": "ab"},
                    "funTitle": {"value": "Chief Raptor", "display": "PUBLIC"},
                }
            },
            context_value=make_context(ScopeAndUser("ad|alice", "staff")),
        )

        assert result.errors is None
        profile = result.data["profile"]
        assert profile["primaryUsername"] == {"value": "ab", "publisher": "mozilliansorg"}
        assert profile["funTitle"] == {"value": "Chief Raptor", "display": "PUBLIC"}
        notifier.notify.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_username_exists(self, make_context, store):
        result = await schema.execute(
            UPDATE_MUTATION,
            variable_values={"update": {"primaryUsername": {"value": "bob"}}},
            context_value=make_context(ScopeAndUser("ad|alice", "staff")),
        )

        assert result.errors[0].extensions["code"] == "username_exists"
        profile = await store.get_user_by("ad|alice", GetBy.USER_ID)
        assert profile.primary_username.value == "alice"

    @pytest.mark.asyncio
    async def test_invalid_username(self, make_context):
        result = await schema.execute(
            UPDATE_MUTATION,
            variable_values={"update": {"primaryUsername": {"value": "no spaces"}}},
            context_value=make_context(ScopeAndUser("ad|alice", "staff")),
        )

        assert result.errors[0].extensions["code"] == "username_invalid_chars"

