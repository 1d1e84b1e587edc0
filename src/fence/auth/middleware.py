"""Derive the request's ScopeAndUser from its bearer token."""

from __future__ import annotations

from ..logging import get_logger
from .adapters.base import AuthAdapter, AuthenticationError
from .context import ScopeAndUser

logger = get_logger(__name__)

DEFAULT_SCOPE = "public"


async def get_scope_and_user(
    authorization: str | None,
    adapter: AuthAdapter,
    scope_claim: str = "scope",
) -> ScopeAndUser | None:
    """
    Extract the caller's identity and scope from an Authorization header.

    Returns None for missing, malformed or rejected tokens; resolvers then fail
    with a missing-user error. A token without a scope claim gets the public
    scope.
    """
    if not authorization:
        return None

    if not authorization.startswith("Bearer "):
        logger.warning("Invalid authorization format received")
        return None

    token = authorization[7:]
    if not token:
        logger.warning("Empty token provided")
        return None

    try:
        principal = await adapter.verify_token(token)
    except AuthenticationError as e:
        logger.warning("Authentication failed", error=str(e))
        return None

    claims = principal.get("claims", {})
    scope = claims.get(scope_claim) or DEFAULT_SCOPE
    return ScopeAndUser(user_id=principal["subject"], scope=str(scope))
