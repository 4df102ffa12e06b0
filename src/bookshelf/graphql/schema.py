"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..logging import get_logger
from .context import get_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)


class SchemaValidationError(Exception):
    """Raised when the GraphQL schema fails validation at startup."""

    pass


# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Author and Book reference each other lazily, so unresolved type
    references only surface once the schema is fully built. Checking here
    makes the server fail fast instead of erroring on the first request.

    Raises:
        SchemaValidationError: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise SchemaValidationError(
                f"GraphQL schema validation failed: {'; '.join(error_messages)}"
            )

        # Check that introspection query works (catches most resolution issues)
        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise SchemaValidationError(
                f"GraphQL introspection failed: {'; '.join(error_messages)}"
            )

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    return GraphQLRouter(
        schema,
        path=settings.graphql_path,
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
