"""HTTP client for the CIS person and change APIs."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..config import CisSettings
from ..logging import get_logger
from ..profile.display import Display
from ..profile.model import Profile
from ..profile.signing import SecretStore
from .base import GetBy, NotFound, StoreUnavailable

logger = get_logger(__name__)


class CisClient:
    """Profile store backed by CIS.

    Reads go to the person API, writes to the change API.
    """

    def __init__(
        self,
        settings: CisSettings,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.person_api_url = settings.person_api_url.rstrip("/")
        self.change_api_url = settings.change_api_url.rstrip("/")
        self.bearer_token = settings.bearer_token
        self._secret_store = SecretStore(settings.signing_key, settings.signing_algorithm)
        self._http_client = http_client or httpx.AsyncClient(timeout=settings.timeout_seconds)

    def _headers(self) -> dict[str, str]:
        if self.bearer_token:
            return {"Authorization": f"Bearer {self.bearer_token}"}
        return {}

    async def get_user_by(
        self, id: str, by: GetBy, filter: Display | None = None
    ) -> Profile:
        url = f"{self.person_api_url}/v2/user/{by.value}/{quote(id, safe='')}"
        params = {"filterDisplay": filter.value} if filter is not None else None

        try:
            response = await self._http_client.get(url, params=params, headers=self._headers())
        except httpx.HTTPError as e:
            logger.error("Person API request failed", by=by.value, error=str(e))
            raise StoreUnavailable("unable to reach person api", cause=e) from e

        if response.status_code == 404:
            raise NotFound(f"no profile for {by.value}", cause=id)
        if response.is_error:
            raise StoreUnavailable(
                "person api returned an error", cause=f"HTTP {response.status_code}"
            )

        try:
            profile = Profile.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise StoreUnavailable("invalid profile from person api", cause=e) from e

        # The person API answers unknown users with an empty profile
        if profile.is_empty():
            raise NotFound(f"no profile for {by.value}", cause=id)
        return profile

    async def update_user(self, id: str, profile: Profile) -> dict[str, Any]:
        url = f"{self.change_api_url}/v2/user"
        try:
            response = await self._http_client.post(
                url,
                params={"user_id": id},
                json=profile.to_json(),
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            logger.error("Change API request failed", error=str(e))
            raise StoreUnavailable("unable to reach change api", cause=e) from e

        if response.is_error:
            raise StoreUnavailable(
                "change api rejected the update", cause=f"HTTP {response.status_code}"
            )

        try:
            return response.json()
        except ValueError:
            return {"status": response.status_code}

    def get_secret_store(self) -> SecretStore:
        return self._secret_store

    async def close(self) -> None:
        await self._http_client.aclose()
