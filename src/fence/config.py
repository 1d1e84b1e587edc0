"""
Configuration management for the Fence service
"""

from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

# Attributes the DinoPark publisher is allowed to write back to CIS.
DEFAULT_WRITABLE_ATTRIBUTES = [
    "primary_username",
    "first_name",
    "last_name",
    "alternative_name",
    "pronouns",
    "fun_title",
    "description",
    "location",
    "timezone",
    "picture",
]


class CisSettings(BaseModel):
    """Connection and signing settings for the CIS profile store."""

    person_api_url: str = "http://localhost:8090"
    change_api_url: str = "http://localhost:8091"
    bearer_token: str | None = None
    signing_key: str = "dev-signing-key"
    signing_algorithm: str = "HS256"
    timeout_seconds: float = 10.0


class FossilSettings(BaseModel):
    """Trust configuration applied when attributes are re-signed on update."""

    publisher: str = "mozilliansorg"
    writable_attributes: list[str] = DEFAULT_WRITABLE_ATTRIBUTES


class LookoutSettings(BaseModel):
    """Downstream listener notified after a profile update was committed."""

    internal_update_enabled: bool = False
    internal_update_endpoint: str = "http://localhost:8092/internal/update"
    timeout_seconds: float = 5.0


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FENCE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Profile store
    store_backend: str = "cis"  # 'cis', 'memory'
    cis: CisSettings = CisSettings()
    fossil: FossilSettings = FossilSettings()
    lookout: LookoutSettings = LookoutSettings()

    # Auth
    auth_provider: str = "none"  # 'none', 'jwt'
    auth_config: dict = {}
    jwt_secret: str | None = None
    jwt_algorithm: str = "HS256"
    auth_scope_claim: str = "scope"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8085
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:8080"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once from the environment."""
    return Settings()
