"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..auth.adapters.base import AuthAdapter
from ..auth.middleware import get_scope_and_user
from ..config import Settings
from ..logging import bind_user_id, get_logger
from ..notify.lookout import LookoutNotifier
from ..store.base import ProfileStoreClient
from .mutations.root import Mutation
from .queries.root import Query
from .resolvers.mutation import MutationResolver
from .resolvers.query import QueryResolver

logger = get_logger(__name__)

GRAPHQL_PATH = "/api/v4/graphql"

schema = strawberry.Schema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def build_context(
    store: ProfileStoreClient,
    settings: Settings,
    notifier: LookoutNotifier | None = None,
) -> dict[str, Any]:
    """Build the per-process part of the resolver context."""
    return {
        "query_resolver": QueryResolver(store, settings),
        "mutation_resolver": MutationResolver(store, settings, notifier=notifier),
    }


def create_graphql_router(
    store: ProfileStoreClient,
    settings: Settings,
    adapter: AuthAdapter,
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    resolvers = build_context(store, settings)

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        scope_and_user = await get_scope_and_user(
            request.headers.get("authorization"), adapter, settings.auth_scope_claim
        )
        bind_user_id(scope_and_user.user_id if scope_and_user else None)
        return {
            "request": request,
            "scope_and_user": scope_and_user,
            **resolvers,
        }

    return GraphQLRouter(
        schema,
        path=GRAPHQL_PATH,
        graphql_ide="graphiql" if settings.debug else None,
        context_getter=get_context,
    )
