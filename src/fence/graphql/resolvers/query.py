from __future__ import annotations

from ...auth.context import ScopeAndUser
from ...config import Settings
from ...logging import get_logger
from ...profile.display import Display, InvalidScope, parse_scope
from ...profile.model import Profile
from ...store.base import GetBy, ProfileStoreClient
from ..access_control import require_user

logger = get_logger(__name__)


def resolve_display(
    scope_and_user: ScopeAndUser,
    username: str | None,
    view_as: Display | None,
) -> Display:
    """
    Compute the display level a profile read is filtered at.

    Never exceeds the caller's scope. A malformed scope or a ``view_as`` above
    the scope falls back to PUBLIC instead of failing the request.
    """
    try:
        scope = parse_scope(scope_and_user.scope)
    except InvalidScope as e:
        logger.warning(
            "Invalid scope",
            scope=scope_and_user.scope,
            user_id=scope_and_user.user_id,
            error=str(e),
        )
        return Display.PUBLIC

    if view_as is not None:
        if view_as <= scope:
            return view_as
        logger.warning(
            "Invalid display",
            display=view_as.value,
            user_id=scope_and_user.user_id,
            scope=scope_and_user.scope,
        )
        return Display.PUBLIC

    if username is not None:
        return scope

    return Display.PRIVATE


class QueryResolver:
    """Resolves profile reads."""

    def __init__(self, store: ProfileStoreClient, settings: Settings):
        self.store = store
        self.settings = settings

    async def profile(
        self,
        scope_and_user: ScopeAndUser | None,
        username: str | None = None,
        view_as: Display | None = None,
    ) -> Profile:
        """Fetch a profile, by primary username or the caller's own, filtered for the caller."""
        caller = require_user(scope_and_user, "no user in query or scope")
        display = resolve_display(caller, username, view_as)

        if username is not None:
            lookup, by = username, GetBy.PRIMARY_USERNAME
        else:
            lookup, by = caller.user_id, GetBy.USER_ID

        logger.debug("Resolving profile", by=by.value, display=display.value)
        return await self.store.get_user_by(lookup, by, display)

