"""
Author GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...store import AuthorRecord
    from .book import Book


@strawberry.type(description="Represents an author of a book")
class Author:
    """Author type for GraphQL API."""

    id: int
    name: str

    @strawberry.field
    async def books(
        self, info: strawberry.Info
    ) -> list[Annotated["Book", strawberry.lazy(".book")] | None] | None:  # noqa: E501
        """Get books written by this author."""
        from ..resolvers.author import resolve_author_books

        return await resolve_author_books(self, info)

    @classmethod
    def from_record(cls, record: "AuthorRecord") -> "Author":
        return cls(id=record.id, name=record.name)
