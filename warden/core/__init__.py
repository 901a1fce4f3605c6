"""
Core module - data models and infrastructure.

This module contains:
- models: CredentialEntity, AttributeDelta, Changeset and field errors
- fields: the per-capability field catalog
- registry: credential schema registry
- utils: shared utility functions
"""

from warden.core.models import (
    AttributeDelta,
    Changeset,
    CredentialEntity,
    FieldError,
    PasswordConfirmationMismatch,
    PasswordTooShort,
)

from warden.core.fields import (
    FIELD_CATALOG,
    FieldSpec,
    build_entity_model,
    coherence_fields,
    persisted_fields,
    schema_fields,
)

from warden.core.registry import (
    RegistryError,
    SchemaRegistry,
    get_registry,
    reset_registry,
)

from warden.core.utils import (
    expired,
    generate_id,
    utc_now,
)

__all__ = [
    # Models
    "AttributeDelta",
    "Changeset",
    "CredentialEntity",
    "FieldError",
    "PasswordConfirmationMismatch",
    "PasswordTooShort",
    # Fields
    "FIELD_CATALOG",
    "FieldSpec",
    "build_entity_model",
    "coherence_fields",
    "persisted_fields",
    "schema_fields",
    # Registry
    "RegistryError",
    "SchemaRegistry",
    "get_registry",
    "reset_registry",
    # Utils
    "expired",
    "generate_id",
    "utc_now",
]
