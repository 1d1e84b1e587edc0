"""
Root GraphQL mutation definitions
"""

import strawberry

from ..access_control import get_scope_and_user_from_info
from ..types.profile import InputProfile, Profile


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation
    async def profile(self, info: strawberry.Info, update: InputProfile) -> Profile:
        """Update the caller's profile and return it as committed."""
        resolver = info.context["mutation_resolver"]
        profile = await resolver.profile(get_scope_and_user_from_info(info), update.to_update())
        return Profile.from_model(profile)
