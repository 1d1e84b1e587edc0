"""Profile store clients."""

from .base import GetBy, NotFound, ProfileStoreClient, StoreError, StoreUnavailable
from .factory import create_profile_store

__all__ = [
    "GetBy",
    "NotFound",
    "ProfileStoreClient",
    "StoreError",
    "StoreUnavailable",
    "create_profile_store",
]
