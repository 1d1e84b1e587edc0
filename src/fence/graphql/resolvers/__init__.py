"""Profile query and mutation resolvers."""

from .mutation import MutationResolver, validate_username
from .query import QueryResolver, resolve_display

__all__ = ["MutationResolver", "QueryResolver", "resolve_display", "validate_username"]
