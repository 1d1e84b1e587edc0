"""Authenticated request context handed to every resolver."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScopeAndUser:
    """The caller's user id and raw authorization scope."""

    user_id: str
    scope: str
