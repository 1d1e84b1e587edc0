"""No-auth adapter for local development without authentication."""

from __future__ import annotations

import os

from ...logging import get_logger
from .base import AuthenticationError, Principal

logger = get_logger(__name__)


class NoAuthAdapter:
    """
    No-auth adapter that treats every bearer token as a fixed development user.

    WARNING: Only use this in development environments!
    """

    def __init__(
        self,
        default_user_id: str = "dev-user",
        default_scope: str = "staff",
        scope_claim: str = "scope",
    ):
        self.default_user_id = default_user_id
        self.default_scope = default_scope
        self.scope_claim = scope_claim

        environment = os.getenv("FENCE_ENVIRONMENT", "").lower()
        if environment in ("production", "prod"):
            raise RuntimeError(
                "NoAuthAdapter cannot be used in production environments. "
                "Please configure a proper authentication provider."
            )

        logger.warning(
            "NoAuthAdapter is active - ALL requests will be treated as authenticated!",
            user_id=default_user_id,
            scope=default_scope,
        )

    async def verify_token(self, token: str) -> Principal:
        """Accept any non-empty token."""
        if not token:
            raise AuthenticationError("Token required (even in no-auth mode)")

        return Principal(
            provider="none",
            subject=self.default_user_id,
            claims={"mode": "development", self.scope_claim: self.default_scope},
        )
