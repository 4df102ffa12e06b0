from __future__ import annotations

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info
from ..types.author import Author
from ..types.book import Book

logger = get_logger(__name__)


# Query resolvers
async def resolve_author_by_id(info: strawberry.Info, id: int | None) -> Author | None:
    """Resolve an author by id. A miss resolves to None, not an error."""
    store = get_store_from_info(info)
    record = store.get_author(id)
    if record is None:
        logger.debug("Author not found", author_id=id)
        return None
    return Author.from_record(record)


async def resolve_authors(info: strawberry.Info) -> list[Author]:
    store = get_store_from_info(info)
    return [Author.from_record(record) for record in store.list_authors()]


# Field resolvers
async def resolve_author_books(author: Author, info: strawberry.Info) -> list[Book]:
    """Resolve the books whose author_id matches this author, in insertion order."""
    store = get_store_from_info(info)
    return [Book.from_record(record) for record in store.books_by_author(author.id)]


# Mutations
async def add_author(info: strawberry.Info, name: str) -> Author:
    store = get_store_from_info(info)
    record = store.add_author(name)
    return Author.from_record(record)
