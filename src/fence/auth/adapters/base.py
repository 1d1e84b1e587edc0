"""Base authentication adapter interface and types."""

from __future__ import annotations

from typing import Literal, NotRequired, Protocol, TypedDict


class Principal(TypedDict):
    """Identity extracted from an incoming token."""

    provider: Literal["jwt", "none"]
    subject: str  # user id (sub)
    claims: NotRequired[dict]


class AuthAdapter(Protocol):
    """Provider-agnostic authentication adapter interface."""

    async def verify_token(self, token: str) -> Principal:
        """
        Verify a token and return the principal identity.

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        ...


class AuthenticationError(Exception):
    """Raised when authentication fails."""

    pass
