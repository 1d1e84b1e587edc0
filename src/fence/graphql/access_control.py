"""
Shared access control helpers for GraphQL resolvers
"""

from typing import TYPE_CHECKING

import strawberry

from ..errors import MISSING_USER, field_error
from ..logging import get_logger

if TYPE_CHECKING:
    from ..auth.context import ScopeAndUser

logger = get_logger(__name__)


def get_scope_and_user_from_info(info: strawberry.Info) -> "ScopeAndUser | None":
    """Return the authenticated caller stored in the GraphQL context, if any."""
    return info.context.get("scope_and_user")


def require_user(scope_and_user: "ScopeAndUser | None", reason: str) -> "ScopeAndUser":
    """
    Ensure the request carries a caller identity.

    Raises:
        FieldError: ``missing_user`` if there is no authenticated caller
    """
    if scope_and_user is None or not scope_and_user.user_id:
        logger.info("Rejected request without user", reason=reason)
        raise field_error(MISSING_USER, reason, "?!")
    return scope_and_user
