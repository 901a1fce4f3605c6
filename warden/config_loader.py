"""
Schema definition loader.

Loads entity-type definitions from YAML and registers a CredentialSchema
for each. A definition looks like:

    name: admin
    overrides:
      invitable: false
      rememberable: false
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from warden.auth.capabilities import CapabilityConfig
from warden.config import Settings
from warden.core.registry import RegistryError, SchemaRegistry, get_registry
from warden.schema import CredentialSchema

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Loads schema definition files and registers them.
    
    This is the standard way to bootstrap every entity type at startup.
    """
    
    def __init__(
        self,
        config_dir: Path | str | None = None,
        registry: SchemaRegistry | None = None,
        config: CapabilityConfig | None = None,
        settings: Settings | None = None,
    ):
        self.registry = registry or get_registry()
        self.config = config
        self.settings = settings
        
        # Default to config/ directory relative to this file's parent
        if config_dir is None:
            config_dir = Path(__file__).parent.parent / "config"
        self.config_dir = Path(config_dir)
    
    def load_all(self) -> dict[str, int]:
        """
        Load all schema definitions under config_dir/schemas.
        
        Returns:
            Dict with counts of each type loaded
        """
        counts = {"schemas": 0}
        
        schemas_dir = self.config_dir / "schemas"
        if schemas_dir.exists():
            paths = sorted([*schemas_dir.glob("*.yaml"), *schemas_dir.glob("*.yml")])
            for path in paths:
                self.load_schema(path)
                counts["schemas"] += 1
        else:
            logger.warning("No schema directory at %s", schemas_dir)
        
        return counts
    
    def load_schema(self, path: Path | str) -> CredentialSchema:
        """Load one schema definition from YAML."""
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        
        schema = self.schema_from_dict(data, source=str(path))
        self.registry.register_schema(schema)
        return schema
    
    def schema_from_dict(self, data: dict[str, Any], source: str = "<dict>") -> CredentialSchema:
        name = data.get("name")
        if not name:
            raise RegistryError(f"Schema definition in {source} has no name")
        
        overrides = data.get("overrides") or {}
        if not isinstance(overrides, dict):
            raise RegistryError(f"Overrides for '{name}' in {source} must be a mapping")

        # Quoted values like "false" would otherwise leave the capability on
        for key, value in overrides.items():
            if not isinstance(value, bool):
                raise RegistryError(
                    f"Override '{key}' for '{name}' in {source} must be true or false, "
                    f"got {value!r}"
                )

        return CredentialSchema(
            name,
            config=self.config,
            settings=self.settings,
            **{str(key): value for key, value in overrides.items()},
        )


def load_config(config_dir: Path | str | None = None) -> dict[str, int]:
    """
    Convenience function to load all schema definitions.
    
    Returns:
        Dict with counts of each type loaded
    """
    loader = ConfigLoader(config_dir)
    return loader.load_all()
