"""In-memory profile store for local development and tests."""

from __future__ import annotations

import asyncio
from typing import Any

from ..logging import get_logger
from ..profile.display import Display
from ..profile.model import Profile
from ..profile.signing import SecretStore
from .base import GetBy, NotFound

logger = get_logger(__name__)


class InMemoryProfileStore:
    """Profiles kept in a dict keyed by user id.

    Filtering mirrors the person API: attributes above the requested display
    level come back blank.
    """

    def __init__(self, secret_store: SecretStore, profiles: list[Profile] | None = None):
        self._secret_store = secret_store
        self._profiles: dict[str, Profile] = {}
        self._lock = asyncio.Lock()
        for profile in profiles or []:
            self._put(profile)

    def _put(self, profile: Profile) -> None:
        if profile.user_id.value is None:
            raise ValueError("profile has no user_id")
        self._profiles[profile.user_id.value] = profile.model_copy(deep=True)

    def _find(self, id: str, by: GetBy) -> Profile:
        if by is GetBy.USER_ID:
            profile = self._profiles.get(id)
        else:
            profile = next(
                (p for p in self._profiles.values() if p.primary_username.value == id), None
            )
        if profile is None:
            raise NotFound(f"no profile for {by.value}", cause=id)
        return profile

    async def get_user_by(
        self, id: str, by: GetBy, filter: Display | None = None
    ) -> Profile:
        async with self._lock:
            profile = self._find(id, by)
            if filter is None:
                return profile.model_copy(deep=True)
            return profile.filtered(filter)

    async def update_user(self, id: str, profile: Profile) -> dict[str, Any]:
        async with self._lock:
            self._find(id, GetBy.USER_ID)
            stored = profile.model_copy(deep=True)
            stored.user_id.value = id
            self._profiles[id] = stored
        logger.debug("Stored profile update", user_id=id)
        return {"status": 200, "user_id": id}

    def get_secret_store(self) -> SecretStore:
        return self._secret_store
