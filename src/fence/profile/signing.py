"""Signing material used to sign profile attributes on update."""

from __future__ import annotations

from typing import Any

import jwt
from jwt.exceptions import PyJWTError


class SigningError(Exception):
    """Raised when an attribute cannot be signed or verified."""


class SecretStore:
    """Holds the publisher key used to produce attribute signatures."""

    def __init__(self, key: str, algorithm: str = "HS256", verify_key: str | None = None):
        self.key = key
        self.algorithm = algorithm
        # Asymmetric algorithms verify with the public half
        self.verify_key = verify_key or key

    def sign(self, payload: dict[str, Any]) -> str:
        """Return a compact JWS over ``payload``."""
        try:
            return jwt.encode(payload, self.key, algorithm=self.algorithm)
        except (PyJWTError, NotImplementedError, ValueError, TypeError) as e:
            raise SigningError(f"unable to sign with {self.algorithm}: {e}") from e

    def verify(self, token: str) -> dict[str, Any]:
        """Decode a JWS produced by :meth:`sign` and return its payload."""
        try:
            return jwt.decode(token, self.verify_key, algorithms=[self.algorithm])
        except PyJWTError as e:
            raise SigningError(f"invalid signature: {e}") from e
