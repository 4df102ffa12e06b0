"""In-memory record store shared by every resolver.

The store owns two append-only sequences, authors and books. A single lock
covers both sequences and their id counters, so an id is assigned and the
record appended in one step even when mutations arrive concurrently.
"""

from __future__ import annotations

import itertools
import threading
from collections.abc import Iterable

from ..logging import get_logger
from .exceptions import UnknownAuthorError
from .records import AuthorRecord, BookRecord

logger = get_logger(__name__)


class RecordStore:
    """Thread-safe holder of the author and book sequences."""

    def __init__(self, strict_author_references: bool = False):
        self.strict_author_references = strict_author_references
        self._lock = threading.Lock()
        self._authors: list[AuthorRecord] = []
        self._books: list[BookRecord] = []
        self._author_ids = itertools.count(1)
        self._book_ids = itertools.count(1)

    # Reads

    def list_authors(self) -> list[AuthorRecord]:
        with self._lock:
            return list(self._authors)

    def list_books(self) -> list[BookRecord]:
        with self._lock:
            return list(self._books)

    def get_author(self, author_id: int | None) -> AuthorRecord | None:
        """Return the first author with the given id, or None."""
        if author_id is None:
            return None
        with self._lock:
            return next((a for a in self._authors if a.id == author_id), None)

    def get_book(self, book_id: int | None) -> BookRecord | None:
        """Return the first book with the given id, or None."""
        if book_id is None:
            return None
        with self._lock:
            return next((b for b in self._books if b.id == book_id), None)

    def books_by_author(self, author_id: int) -> list[BookRecord]:
        """Return the books written by an author, in insertion order."""
        with self._lock:
            return [b for b in self._books if b.author_id == author_id]

    @property
    def author_count(self) -> int:
        with self._lock:
            return len(self._authors)

    @property
    def book_count(self) -> int:
        with self._lock:
            return len(self._books)

    # Writes

    def add_author(self, name: str) -> AuthorRecord:
        """Create an author with the next free id and append it."""
        with self._lock:
            author = AuthorRecord(id=next(self._author_ids), name=name)
            self._authors.append(author)

        logger.info("Author added", author_id=author.id)
        return author

    def add_book(self, name: str, author_id: int) -> BookRecord:
        """Create a book with the next free id and append it.

        Raises:
            UnknownAuthorError: if the store is strict and no author has
                ``author_id``. Nothing is appended in that case.
        """
        with self._lock:
            if self.strict_author_references and not any(
                a.id == author_id for a in self._authors
            ):
                raise UnknownAuthorError(author_id)

            book = BookRecord(id=next(self._book_ids), name=name, author_id=author_id)
            self._books.append(book)

        logger.info("Book added", book_id=book.id, author_id=author_id)
        return book

    def load(self, authors: Iterable[AuthorRecord], books: Iterable[BookRecord]) -> None:
        """Append pre-built records, keeping their ids.

        Id counters are moved past the highest loaded id so later inserts
        never reuse one.
        """
        with self._lock:
            self._authors.extend(authors)
            self._books.extend(books)
            self._author_ids = itertools.count(max((a.id for a in self._authors), default=0) + 1)
            self._book_ids = itertools.count(max((b.id for b in self._books), default=0) + 1)
