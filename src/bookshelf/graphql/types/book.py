"""
Book GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...store import BookRecord
    from .author import Author


@strawberry.type(description="Represents a book written by an author")
class Book:
    """Book type for GraphQL API."""

    id: int
    name: str
    author_id: int

    @strawberry.field
    async def author(self, info: strawberry.Info) -> Annotated["Author", strawberry.lazy(".author")]:
        """Get the author of this book.

        Declared non-null: a dangling author_id resolves to None and the
        execution engine reports it as a field error.
        """
        from ..resolvers.book import resolve_book_author

        return await resolve_book_author(self, info)

    @classmethod
    def from_record(cls, record: "BookRecord") -> "Book":
        return cls(id=record.id, name=record.name, author_id=record.author_id)
