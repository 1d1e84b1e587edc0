from __future__ import annotations

from collections.abc import Callable

from ...auth.context import ScopeAndUser
from ...config import FossilSettings, Settings
from ...errors import (
    UPDATE_APPLY_FAILED,
    USERNAME_EXISTS,
    USERNAME_INVALID_CHARS,
    USERNAME_LENGTH,
    USERNAME_RULES,
    field_error,
)
from ...logging import get_logger
from ...notify.lookout import LookoutNotifier
from ...profile.model import Profile
from ...profile.signing import SecretStore
from ...profile.update import ProfileUpdate, ProfileUpdateError, apply_update
from ...store.base import GetBy, NotFound, ProfileStoreClient
from ..access_control import require_user

logger = get_logger(__name__)

MIN_USERNAME_LENGTH = 2
MAX_USERNAME_LENGTH = 64

UpdateApplier = Callable[[ProfileUpdate, Profile, SecretStore, FossilSettings], Profile]


def _is_username_char(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c in "-_"


def validate_username(username: str) -> None:
    """
    Check a new primary username against the length and character rules.

    Raises:
        FieldError: ``username_length`` or ``username_invalid_chars``
    """
    if not MIN_USERNAME_LENGTH <= len(username) <= MAX_USERNAME_LENGTH:
        raise field_error(USERNAME_LENGTH, USERNAME_RULES, len(username))
    if not all(_is_username_char(c) for c in username):
        raise field_error(USERNAME_INVALID_CHARS, USERNAME_RULES, username)


class MutationResolver:
    """Resolves profile updates for the authenticated caller."""

    def __init__(
        self,
        store: ProfileStoreClient,
        settings: Settings,
        notifier: LookoutNotifier | None = None,
        applier: UpdateApplier = apply_update,
    ):
        self.store = store
        self.settings = settings
        self.notifier = notifier or LookoutNotifier(settings.lookout)
        self.applier = applier

    async def _ensure_username_available(self, username: str) -> None:
        try:
            await self.store.get_user_by(username, GetBy.PRIMARY_USERNAME, None)
        except NotFound:
            return
        raise field_error(USERNAME_EXISTS, "This username already exists!", username)

    async def profile(
        self, scope_and_user: ScopeAndUser | None, update: ProfileUpdate
    ) -> Profile:
        """
        Apply ``update`` to the caller's profile.

        1. Load the caller's full profile
        2. Validate a changed primary username and check it is not taken
        3. Merge and re-sign the update, then commit it
        4. Reread the committed profile and hand it to lookout

        Any failure before the commit aborts without writing. Lookout failures
        are only logged.
        """
        caller = require_user(scope_and_user, "no username in query or scope")
        user_id = caller.user_id

        profile = await self.store.get_user_by(user_id, GetBy.USER_ID, None)

        new_username = update.primary_username
        if new_username is not None and new_username != profile.primary_username.value:
            validate_username(new_username)
            await self._ensure_username_available(new_username)

        try:
            updated = self.applier(
                update,
                profile,
                self.store.get_secret_store(),
                self.settings.fossil,
            )
        except ProfileUpdateError as e:
            logger.warning("Unable to apply profile update", user_id=user_id, error=str(e))
            raise field_error(UPDATE_APPLY_FAILED, "unable update/sign profile", e) from e

        ack = await self.store.update_user(user_id, updated)
        logger.info("Profile updated", user_id=user_id, ack=ack)

        updated_profile = await self.store.get_user_by(user_id, GetBy.USER_ID, None)
        await self.notifier.notify(updated_profile)
        return updated_profile
