from __future__ import annotations

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info
from ..types.author import Author
from ..types.book import Book

logger = get_logger(__name__)


# Query resolvers
async def resolve_book_by_id(info: strawberry.Info, id: int | None) -> Book | None:
    """Resolve a book by id. A miss resolves to None, not an error."""
    store = get_store_from_info(info)
    record = store.get_book(id)
    if record is None:
        logger.debug("Book not found", book_id=id)
        return None
    return Book.from_record(record)


async def resolve_books(info: strawberry.Info) -> list[Book]:
    store = get_store_from_info(info)
    return [Book.from_record(record) for record in store.list_books()]


# Field resolvers
async def resolve_book_author(book: Book, info: strawberry.Info) -> Author | None:
    """
    Resolve the author of a book.

    Returns None for a dangling author_id; Book.author is non-null, so the
    execution engine turns that into a field error.
    """
    store = get_store_from_info(info)
    record = store.get_author(book.author_id)
    if record is None:
        logger.warning("Book references unknown author", book_id=book.id, author_id=book.author_id)
        return None
    return Author.from_record(record)


# Mutations
async def add_book(info: strawberry.Info, name: str, author_id: int) -> Book:
    """
    Append a new book and return it.

    Raises:
        UnknownAuthorError: when the store enforces author references and
            author_id matches no author.
    """
    store = get_store_from_info(info)
    record = store.add_book(name, author_id)
    return Book.from_record(record)
