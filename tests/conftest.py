"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from datetime import UTC, datetime
from typing import Any

import pytest

from fence.auth.context import ScopeAndUser
from fence.config import CisSettings, LookoutSettings, Settings
from fence.profile.display import Display
from fence.profile.model import Metadata, Profile, Publisher, Signature, StandardAttributeString
from fence.profile.signing import SecretStore
from fence.store.memory import InMemoryProfileStore

SIGNING_KEY = "test-signing-key-for-testing-only-0123456789"


def make_attribute(
    value: str | None,
    display: Display | None = Display.PUBLIC,
    publisher: str = "mozilliansorg",
) -> StandardAttributeString:
    created = datetime(2019, 1, 1, tzinfo=UTC)
    return StandardAttributeString(
        value=value,
        metadata=Metadata(created=created, last_modified=created, display=display),
        signature=Signature(publisher=Publisher(name=publisher, value="original-signature")),
    )


def make_profile(user_id: str, username: str, **attributes: Any) -> Profile:
    """Build a profile with sensible displays; keyword arguments override attributes."""
    fields = {
        "user_id": make_attribute(user_id, Display.PUBLIC, publisher="access_provider"),
        "primary_username": make_attribute(username, Display.PUBLIC),
        "primary_email": make_attribute(f"{username}@example.com", Display.STAFF, "hris"),
        "first_name": make_attribute(username.capitalize(), Display.PUBLIC),
        "fun_title": make_attribute("Dinosaur keeper", Display.AUTHENTICATED),
        "location": make_attribute("Berlin", Display.STAFF),
        "pronouns": make_attribute("they/them", Display.PRIVATE),
    }
    for name, value in attributes.items():
        if not isinstance(value, StandardAttributeString):
            value = make_attribute(value)
        fields[name] = value
    return Profile(**fields)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        store_backend="memory",
        cis=CisSettings(signing_key=SIGNING_KEY),
        lookout=LookoutSettings(
            internal_update_enabled=False,
            internal_update_endpoint="http://lookout.test/internal/update",
        ),
    )


@pytest.fixture
def secret_store() -> SecretStore:
    return SecretStore(SIGNING_KEY)


@pytest.fixture
def alice() -> Profile:
    return make_profile("ad|alice", "alice")


@pytest.fixture
def bob() -> Profile:
    return make_profile("ad|bob", "bob")


@pytest.fixture
def store(secret_store: SecretStore, alice: Profile, bob: Profile) -> InMemoryProfileStore:
    return InMemoryProfileStore(secret_store, [alice, bob])


@pytest.fixture
def as_alice() -> ScopeAndUser:
    return ScopeAndUser(user_id="ad|alice", scope="staff")


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def profile_factory():
    """Factory building profiles for tests."""
    return make_profile


@pytest.fixture
def attribute_factory():
    """Factory building signed attributes for tests."""
    return make_attribute
