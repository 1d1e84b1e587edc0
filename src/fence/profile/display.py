"""Display levels controlling which profile attributes a viewer may see."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

import strawberry


class InvalidScope(ValueError):
    """Raised when a request scope does not name a display level."""


@strawberry.enum
@total_ordering
class Display(Enum):
    """Visibility tier of a profile attribute, ordered from least to most private."""

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    VOUCHED = "vouched"
    NDAED = "ndaed"
    STAFF = "staff"
    PRIVATE = "private"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Display):
            return NotImplemented
        return self.rank < other.rank


_RANKS = {display: rank for rank, display in enumerate(Display)}


def parse_scope(scope: str | None) -> Display:
    """
    Parse a request scope into a display level.

    Only the exact lowercase wire values (``"staff"``) are accepted.

    Raises:
        InvalidScope: If the scope is empty or names no display level
    """
    if not scope:
        raise InvalidScope("empty scope")

    try:
        return Display(scope)
    except ValueError:
        raise InvalidScope(f"unknown scope: {scope}") from None
