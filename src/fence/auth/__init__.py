"""Authentication for Fence requests."""

from .adapters.base import AuthAdapter, AuthenticationError, Principal
from .context import ScopeAndUser
from .factory import get_auth_adapter
from .middleware import get_scope_and_user

__all__ = [
    "AuthAdapter",
    "AuthenticationError",
    "Principal",
    "ScopeAndUser",
    "get_auth_adapter",
    "get_scope_and_user",
]
