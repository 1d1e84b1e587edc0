"""
Root GraphQL query definitions
"""

import strawberry

from ...profile.display import Display
from ..access_control import get_scope_and_user_from_info
from ..types.profile import Profile


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def profile(
        self,
        info: strawberry.Info,
        username: str | None = None,
        view_as: Display | None = None,
    ) -> Profile:
        """Get a profile by primary username, or the caller's own profile."""
        resolver = info.context["query_resolver"]
        profile = await resolver.profile(get_scope_and_user_from_info(info), username, view_as)
        return Profile.from_model(profile)
