"""
Storage abstraction layer.

Credential entities are owned by the application's own persistence.
Transitions in warden only produce AttributeDeltas; an EntityRepository
is what applies them. Implementations decide how concurrent updates are
reconciled (conditional updates, optimistic locking, or last write wins).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from warden.core.models import AttributeDelta


class RepositoryError(Exception):
    """Raised when the repository can't apply an operation."""
    pass


class EntityRepository(ABC):
    """
    Storage for credential entities.
    
    Local Implementation: in-memory (warden.storage.local)
    """
    
    @abstractmethod
    def get(self, entity_id: str) -> Any | None:
        """Get an entity by ID."""
        pass
    
    @abstractmethod
    def save(self, entity: Any) -> Any:
        """Insert or replace an entity."""
        pass
    
    @abstractmethod
    def update(self, entity: Any, delta: AttributeDelta) -> Any:
        """
        Apply a delta to a stored entity and return the updated entity.
        
        Raises:
            RepositoryError: The entity is not stored
        """
        pass
