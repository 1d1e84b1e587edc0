"""Tests for settings loading."""

from fence.config import DEFAULT_WRITABLE_ATTRIBUTES, Settings


def test_defaults():
    settings = Settings()

    assert settings.lookout.internal_update_enabled is False
    assert settings.fossil.publisher == "mozilliansorg"
    assert settings.fossil.writable_attributes == DEFAULT_WRITABLE_ATTRIBUTES
    assert "primary_email" not in settings.fossil.writable_attributes


def test_nested_settings_from_environment(monkeypatch):
    monkeypatch.setenv("FENCE_LOOKOUT__INTERNAL_UPDATE_ENABLED", "true")
    monkeypatch.setenv("FENCE_LOOKOUT__INTERNAL_UPDATE_ENDPOINT", "http://lookout:8080/update")
    monkeypatch.setenv("FENCE_CIS__PERSON_API_URL", "https://person.example.com")
    monkeypatch.setenv("FENCE_FOSSIL__PUBLISHER", "dinopark")
    monkeypatch.setenv("FENCE_STORE_BACKEND", "memory")

    settings = Settings()

    assert settings.lookout.internal_update_enabled is True
    assert settings.lookout.internal_update_endpoint == "http://lookout:8080/update"
    assert settings.cis.person_api_url == "https://person.example.com"
    assert settings.fossil.publisher == "dinopark"
    assert settings.store_backend == "memory"
