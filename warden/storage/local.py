"""
Local storage implementation for development and tests.

Works without any external services.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from warden.core.models import AttributeDelta
from warden.core.utils import get_attr
from warden.storage.base import EntityRepository, RepositoryError

logger = logging.getLogger(__name__)


class InMemoryRepository(EntityRepository):
    """Keeps entities in a dict keyed by their `id`. Last write wins."""
    
    def __init__(self):
        self._entities: dict[str, Any] = {}
        self._lock = threading.Lock()
    
    def _id_of(self, entity: Any) -> str:
        entity_id = get_attr(entity, "id")
        if entity_id is None:
            raise RepositoryError("Entity has no id")
        return entity_id
    
    def get(self, entity_id: str) -> Any | None:
        return self._entities.get(entity_id)
    
    def save(self, entity: Any) -> Any:
        with self._lock:
            self._entities[self._id_of(entity)] = entity
        return entity
    
    def update(self, entity: Any, delta: AttributeDelta) -> Any:
        entity_id = self._id_of(entity)
        with self._lock:
            stored = self._entities.get(entity_id)
            if stored is None:
                raise RepositoryError(f"Entity '{entity_id}' not found")
            updated = delta.apply(stored)
            self._entities[entity_id] = updated
        logger.debug("Updated %s: %s", entity_id, sorted(delta.changes))
        return updated
    
    def __len__(self) -> int:
        return len(self._entities)
