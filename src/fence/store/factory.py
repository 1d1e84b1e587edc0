"""Factory for creating the profile store based on configuration."""

from __future__ import annotations

from ..config import Settings
from ..logging import get_logger
from ..profile.signing import SecretStore
from .base import ProfileStoreClient
from .cis import CisClient
from .memory import InMemoryProfileStore

logger = get_logger(__name__)


def create_profile_store(settings: Settings) -> ProfileStoreClient:
    """Create and return the configured profile store."""
    backend = settings.store_backend.lower()

    if backend == "cis":
        logger.info(
            "Using CIS profile store",
            person_api_url=settings.cis.person_api_url,
            change_api_url=settings.cis.change_api_url,
        )
        return CisClient(settings.cis)

    elif backend == "memory":
        if settings.environment.lower() in ("production", "prod"):
            raise ValueError("The in-memory profile store cannot be used in production")
        logger.warning("Using in-memory profile store; profiles are lost on restart")
        return InMemoryProfileStore(
            SecretStore(settings.cis.signing_key, settings.cis.signing_algorithm)
        )

    else:
        raise ValueError(f"Unsupported store backend: {settings.store_backend}")
