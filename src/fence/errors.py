"""
Field-level errors returned to GraphQL callers.

Every failure a resolver surfaces carries a stable machine-readable ``code``,
a human message and the underlying cause. graphql-core copies ``extensions``
from the original exception onto the located error, so callers see the same
shape regardless of which step failed.
"""

from __future__ import annotations

from typing import Any

MISSING_USER = "missing_user"
USERNAME_LENGTH = "username_length"
USERNAME_INVALID_CHARS = "username_invalid_chars"
USERNAME_EXISTS = "username_exists"
UPDATE_APPLY_FAILED = "update_apply_failed"
NOT_FOUND = "not_found"
STORE_UNAVAILABLE = "store_unavailable"

USERNAME_RULES = (
    "Length of username must be between 2 and 64. And only contain letters from a-z, "
    "digits from 0-9, underscore or hyphen."
)


class FieldError(Exception):
    """A failure scoped to a single GraphQL field."""

    code = "internal_error"

    def __init__(self, message: str, cause: Any = None, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        if code is not None:
            self.code = code

    @property
    def extensions(self) -> dict[str, Any]:
        internal = f"{self.message}: {self.cause}" if self.cause is not None else self.message
        return {"code": self.code, "internal_error": internal}


def field_error(code: str, message: str, cause: Any = None) -> FieldError:
    """Wrap a lower-level failure into a field error with a stable code."""
    return FieldError(message, cause=cause, code=code)
