"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from bookshelf.store import RecordStore, init_store, reset_store


@pytest.fixture(autouse=True)
def fresh_store() -> Generator[None, None, None]:
    """Start every test from a newly seeded shared store."""
    reset_store()
    yield
    reset_store()


@pytest.fixture
def store() -> RecordStore:
    """The shared, seeded, non-strict record store."""
    return init_store(seed=True, strict_author_references=False, force_reinit=True)


@pytest.fixture
def strict_store() -> RecordStore:
    """A seeded store that rejects books for unknown authors."""
    return init_store(seed=True, strict_author_references=True, force_reinit=True)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
