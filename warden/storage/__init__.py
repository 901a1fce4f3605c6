"""
Storage abstractions.

Integration Points:
- EntityRepository → the application's user table (SQL, document store, ...)
- InMemoryRepository → development and tests
"""

from warden.storage.base import EntityRepository, RepositoryError
from warden.storage.local import InMemoryRepository

__all__ = [
    "EntityRepository",
    "RepositoryError",
    "InMemoryRepository",
]
