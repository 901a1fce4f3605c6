"""
Core data models for warden.

These are the shapes that flow between the capability engine and its
collaborators: the credential-bearing entity, the attribute deltas that
transitions produce, and changesets carrying field-level errors.
"""

from __future__ import annotations

import copy
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from warden.core.utils import generate_id


# =============================================================================
# Entity
# =============================================================================


class CredentialEntity(BaseModel):
    """
    An account holder with every capability's fields present.
    
    Entity types with fewer capabilities can be built from the field
    catalog instead (see warden.core.fields.build_entity_model). The
    state functions only read attributes by name, so either works.
    """
    
    id: str = Field(default_factory=lambda: generate_id("user"))
    email: str | None = None
    
    # authenticatable
    encrypted_password: str | None = None
    password: str | None = Field(default=None, exclude=True, repr=False)
    password_confirmation: str | None = Field(default=None, exclude=True, repr=False)
    
    # recoverable
    reset_password_token: str | None = None
    reset_password_sent_at: datetime | None = None
    
    # rememberable
    remember_created_at: datetime | None = None
    
    # trackable
    sign_in_count: int = 0
    current_sign_in_at: datetime | None = None
    last_sign_in_at: datetime | None = None
    current_sign_in_ip: str | None = None
    last_sign_in_ip: str | None = None
    
    # lockable
    failed_attempts: int = 0
    unlock_token: str | None = None
    locked_at: datetime | None = None
    
    # confirmable
    confirmation_token: str | None = None
    confirmed_at: datetime | None = None
    confirmation_send_at: datetime | None = None


# =============================================================================
# Attribute Delta
# =============================================================================


class AttributeDelta(BaseModel):
    """
    The minimal set of field changes produced by a transition.
    
    Deltas are handed unchanged to the repository, which applies them
    atomically.
    """
    
    changes: dict[str, Any] = Field(default_factory=dict)
    
    def __getitem__(self, key: str) -> Any:
        return self.changes[key]
    
    def __contains__(self, key: object) -> bool:
        return key in self.changes
    
    def get(self, key: str, default: Any = None) -> Any:
        return self.changes.get(key, default)
    
    def merge(self, other: AttributeDelta) -> AttributeDelta:
        """Combine two deltas; later changes win."""
        return AttributeDelta(changes={**self.changes, **other.changes})
    
    def apply(self, entity: Any) -> Any:
        """Return a copy of the entity with the changes applied."""
        if isinstance(entity, BaseModel):
            return entity.model_copy(update=self.changes)
        if isinstance(entity, dict):
            return {**entity, **self.changes}
        updated = copy.copy(entity)
        for key, value in self.changes.items():
            setattr(updated, key, value)
        return updated


# =============================================================================
# Validation Errors
# =============================================================================


class FieldError(BaseModel):
    """A validation error attached to a single field."""
    
    field: str
    message: str
    code: str = "invalid"


class PasswordTooShort(FieldError):
    field: str = "password"
    code: str = "too_short"
    min_length: int = 4
    message: str = ""
    
    def model_post_init(self, __context: Any) -> None:
        if not self.message:
            self.message = f"should be at least {self.min_length} character(s)"


class PasswordConfirmationMismatch(FieldError):
    field: str = "password_confirmation"
    code: str = "confirmation"
    message: str = "does not match confirmation"


# =============================================================================
# Changeset
# =============================================================================


class Changeset(BaseModel):
    """
    Proposed changes to an entity, paired with validation errors.
    
    Changesets are treated as values: every helper returns a new one.
    """
    
    data: dict[str, Any] = Field(default_factory=dict)
    changes: dict[str, Any] = Field(default_factory=dict)
    errors: list[FieldError] = Field(default_factory=list)
    
    @classmethod
    def cast(
        cls,
        entity: Any,
        params: dict[str, Any],
        allowed: list[str] | tuple[str, ...],
    ) -> Changeset:
        """Build a changeset from params, keeping allowed fields that differ."""
        if isinstance(entity, BaseModel):
            data = entity.model_dump()
        elif isinstance(entity, dict):
            data = dict(entity)
        else:
            data = dict(vars(entity))
        
        changes = {
            key: params[key]
            for key in allowed
            if key in params and params[key] != data.get(key)
        }
        return cls(data=data, changes=changes)
    
    @property
    def valid(self) -> bool:
        return not self.errors
    
    def get_change(self, field: str, default: Any = None) -> Any:
        return self.changes.get(field, default)
    
    def put_change(self, field: str, value: Any) -> Changeset:
        return self.model_copy(update={"changes": {**self.changes, field: value}})
    
    def add_error(self, error: FieldError) -> Changeset:
        return self.model_copy(update={"errors": [*self.errors, error]})
    
    def errors_on(self, field: str) -> list[FieldError]:
        return [e for e in self.errors if e.field == field]
    
    def to_delta(self) -> AttributeDelta:
        """The changes as a delta for the repository."""
        return AttributeDelta(changes=dict(self.changes))
