"""Profile store interface and the errors its implementations raise."""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol

from ..errors import NOT_FOUND, STORE_UNAVAILABLE, FieldError
from ..profile.display import Display
from ..profile.model import Profile
from ..profile.signing import SecretStore


class GetBy(Enum):
    """Key a profile is looked up by."""

    USER_ID = "user_id"
    PRIMARY_USERNAME = "primary_username"


class StoreError(FieldError):
    """Base exception for profile store operations."""


class NotFound(StoreError):
    """No profile exists for the requested key."""

    code = NOT_FOUND


class StoreUnavailable(StoreError):
    """The store could not be reached or answered with an error."""

    code = STORE_UNAVAILABLE


class ProfileStoreClient(Protocol):
    """Capability the resolvers consume to read and write profiles.

    Implementations must be safe to call concurrently from independent requests.
    """

    async def get_user_by(
        self, id: str, by: GetBy, filter: Display | None = None
    ) -> Profile:
        """
        Fetch a single profile.

        Args:
            id: User id or primary username, depending on ``by``
            by: Which key ``id`` is
            filter: Display level to filter attributes at, or None for the full profile

        Raises:
            NotFound: If no profile exists for the key
            StoreUnavailable: If the store could not answer
        """
        ...

    async def update_user(self, id: str, profile: Profile) -> dict[str, Any]:
        """Submit ``profile`` as the new state of user ``id`` and return the store's ack."""
        ...

    def get_secret_store(self) -> SecretStore:
        """Signing material used to sign attributes written through this store."""
        ...
