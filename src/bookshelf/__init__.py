"""
Bookshelf Backend
GraphQL endpoint over an in-memory catalogue of authors and books
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
