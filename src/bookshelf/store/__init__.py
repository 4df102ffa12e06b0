"""
Record store for Bookshelf backend

One process-wide ``RecordStore`` is shared by every request, so a mutation is
visible to all later reads.
"""

from __future__ import annotations

import threading

from ..config import settings
from ..logging import get_logger
from .exceptions import StoreError, UnknownAuthorError
from .memory import RecordStore
from .records import AuthorRecord, BookRecord
from .seed import load_seed_data

logger = get_logger(__name__)

_store: RecordStore | None = None
_init_lock = threading.Lock()


def init_store(
    *,
    seed: bool | None = None,
    strict_author_references: bool | None = None,
    force_reinit: bool = False,
) -> RecordStore:
    """Create the shared store, seeding it unless disabled.

    Arguments left as None fall back to the configured settings.
    """
    global _store

    if _store is not None and not force_reinit:
        return _store

    with _init_lock:
        # Another thread may have initialized while we waited
        if _store is not None and not force_reinit:
            return _store

        if seed is None:
            seed = settings.seed_data
        if strict_author_references is None:
            strict_author_references = settings.strict_author_references

        store = RecordStore(strict_author_references=strict_author_references)
        if seed:
            load_seed_data(store)

        _store = store
        logger.info(
            "Record store initialized",
            seeded=seed,
            strict_author_references=strict_author_references,
        )
        return store


def get_store() -> RecordStore:
    """Get the shared record store, creating it on first use."""
    if _store is None:
        return init_store()
    return _store


def reset_store() -> None:
    """Drop the shared store (for tests)."""
    global _store
    _store = None


__all__ = [
    "AuthorRecord",
    "BookRecord",
    "RecordStore",
    "StoreError",
    "UnknownAuthorError",
    "get_store",
    "init_store",
    "load_seed_data",
    "reset_store",
]
