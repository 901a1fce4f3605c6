"""
Registry for credential schemas.

Entity types register their CredentialSchema here once at startup, so
the rest of the application can look them up by name.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from warden.schema import CredentialSchema

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Raised when there's an error with the registry."""
    pass


class SchemaRegistry:
    """Central lookup of credential schemas by entity-type name."""
    
    def __init__(self):
        self._schemas: dict[str, CredentialSchema] = {}
    
    def register_schema(self, schema: CredentialSchema) -> None:
        """Register a schema by its name."""
        if schema.name in self._schemas:
            raise RegistryError(f"Schema '{schema.name}' is already registered")
        self._schemas[schema.name] = schema
        logger.info("Registered credential schema %r", schema)
    
    def get_schema(self, name: str) -> CredentialSchema:
        """Get a schema by name."""
        if name not in self._schemas:
            raise RegistryError(f"Schema '{name}' not found")
        return self._schemas[name]
    
    def list_schemas(self) -> list[str]:
        """List all registered schema names."""
        return list(self._schemas.keys())
    
    def __contains__(self, name: object) -> bool:
        return name in self._schemas


# Singleton registry for the application
_default_registry: SchemaRegistry | None = None


def get_registry() -> SchemaRegistry:
    """Get the default registry instance."""
    global _default_registry
    if _default_registry is None:
        _default_registry = SchemaRegistry()
    return _default_registry


def reset_registry() -> None:
    """Reset the default registry (useful for testing)."""
    global _default_registry
    _default_registry = None
