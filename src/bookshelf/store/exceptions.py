"""Exceptions raised by the record store."""


class StoreError(Exception):
    """Base exception for record store operations."""

    pass


class UnknownAuthorError(StoreError):
    """Raised when a book references an author that does not exist."""

    def __init__(self, author_id: int):
        self.author_id = author_id
        super().__init__(f"No author with id {author_id}")
