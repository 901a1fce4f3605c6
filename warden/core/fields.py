"""
Field catalog.

Which logical fields each capability needs, in declaration order. Schema
declaration and migration tooling read this; nothing here has runtime
behavior beyond assembling field lists and models from it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, NamedTuple

from pydantic import BaseModel, Field, create_model

from warden.auth.capabilities import Capability


class FieldSpec(NamedTuple):
    """One storage field. Virtual fields are never persisted."""
    
    name: str
    type: str
    default: Any = None
    virtual: bool = False


FIELD_CATALOG: dict[Capability, tuple[FieldSpec, ...]] = {
    Capability.AUTHENTICATABLE: (
        FieldSpec("encrypted_password", "string"),
        FieldSpec("password", "string", virtual=True),
        FieldSpec("password_confirmation", "string", virtual=True),
    ),
    Capability.RECOVERABLE: (
        FieldSpec("reset_password_token", "string"),
        FieldSpec("reset_password_sent_at", "datetime"),
    ),
    Capability.REMEMBERABLE: (
        FieldSpec("remember_created_at", "datetime"),
    ),
    Capability.TRACKABLE: (
        FieldSpec("sign_in_count", "integer", default=0),
        FieldSpec("current_sign_in_at", "datetime"),
        FieldSpec("last_sign_in_at", "datetime"),
        FieldSpec("current_sign_in_ip", "string"),
        FieldSpec("last_sign_in_ip", "string"),
    ),
    Capability.LOCKABLE: (
        FieldSpec("failed_attempts", "integer", default=0),
        FieldSpec("unlock_token", "string"),
        FieldSpec("locked_at", "datetime"),
    ),
    Capability.CONFIRMABLE: (
        FieldSpec("confirmation_token", "string"),
        FieldSpec("confirmed_at", "datetime"),
        FieldSpec("confirmation_send_at", "datetime"),
    ),
}

# Python types for the catalog's logical types
PYTHON_TYPES: dict[str, type] = {
    "string": str,
    "integer": int,
    "datetime": datetime,
}


def schema_fields(capabilities: Iterable[Capability]) -> list[FieldSpec]:
    """Field specs for the given capabilities, in catalog order."""
    enabled = set(capabilities)
    return [
        spec
        for cap, specs in FIELD_CATALOG.items()
        if cap in enabled
        for spec in specs
    ]


def coherence_fields(capabilities: Iterable[Capability]) -> list[str]:
    """
    Names of every catalog field for the given capabilities.
    
    Meant to be appended to an entity's optional changeset fields.
    """
    return [spec.name for spec in schema_fields(capabilities)]


def persisted_fields(capabilities: Iterable[Capability]) -> list[str]:
    """Like coherence_fields, without the virtual ones."""
    return [spec.name for spec in schema_fields(capabilities) if not spec.virtual]


def build_entity_model(
    name: str,
    capabilities: Iterable[Capability],
    base: type[BaseModel] = BaseModel,
) -> type[BaseModel]:
    """
    Assemble an entity model carrying exactly the enabled capabilities' fields.
    
    Usage:
        User = build_entity_model("User", {Capability.LOCKABLE})
        user = User(locked_at=utc_now())
    """
    definitions: dict[str, Any] = {}
    for spec in schema_fields(capabilities):
        annotation = PYTHON_TYPES[spec.type]
        if spec.default is None:
            annotation = annotation | None
        if spec.virtual:
            definitions[spec.name] = (annotation, Field(default=spec.default, exclude=True))
        else:
            definitions[spec.name] = (annotation, spec.default)
    return create_model(name, __base__=base, **definitions)
