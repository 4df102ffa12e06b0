"""
Shared GraphQL context helpers
"""

from typing import Any

import strawberry
from fastapi import Request

from ..logging import get_logger
from ..store import RecordStore, get_store

logger = get_logger(__name__)


async def get_context(request: Request) -> dict[str, Any]:
    """Get the context for GraphQL resolvers."""
    return {
        "request": request,
        "store": get_store(),
    }


def get_store_from_info(info: strawberry.Info) -> RecordStore:
    """
    Extract the record store from the GraphQL info object.

    Falls back to the shared store when the context does not carry one,
    e.g. when the schema is executed directly rather than over HTTP.
    """
    context = info.context
    store = context.get("store") if isinstance(context, dict) else None
    if store is None:
        logger.debug("Record store not found in GraphQL context, using shared store")
        return get_store()
    return store
