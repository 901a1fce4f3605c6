"""
Credential schemas.

A CredentialSchema is the per-entity-type view of the capability engine.
Declare one per account-holder type, optionally narrowing the global
capabilities:

    users = CredentialSchema("user")
    admins = CredentialSchema("admin", invitable=False, rememberable=False)

Predicates (`confirmable()`, `lockable()`, ...) are always available.
Operations that belong to a capability raise CapabilityDisabled when the
schema doesn't have it, so callers check the predicate first:

    if users.lockable() and users.locked(user):
        ...

Every transition returns an AttributeDelta or Changeset for the
repository to persist.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel

from warden.auth import confirmable, lockable, password, recoverable, trackable
from warden.auth.capabilities import (
    Capability,
    CapabilityConfig,
    CapabilityDisabled,
    get_capability_config,
    normalize_overrides,
)
from warden.config import Settings, get_settings
from warden.core.fields import (
    FieldSpec,
    build_entity_model,
    coherence_fields,
    persisted_fields,
    schema_fields,
)
from warden.core.models import AttributeDelta, Changeset

logger = logging.getLogger(__name__)


class CredentialSchema:
    """Capability-gated credential operations for one entity type."""
    
    def __init__(
        self,
        name: str,
        config: CapabilityConfig | None = None,
        settings: Settings | None = None,
        **overrides: bool,
    ):
        self.name = name
        self.config = config or get_capability_config()
        self.settings = settings or get_settings()
        self.overrides = normalize_overrides(overrides)
        
        unknown = set(overrides) - {cap.value for cap in Capability}
        if unknown:
            logger.warning(
                "Schema '%s' ignores unknown capability overrides: %s",
                name, ", ".join(sorted(unknown)),
            )
    
    def __repr__(self) -> str:
        caps = sorted(cap.value for cap in self.enabled())
        return f"CredentialSchema({self.name!r}, {caps})"
    
    # =========================================================================
    # Capability predicates
    # =========================================================================
    
    def has(self, capability: Capability | str) -> bool:
        return self.config.is_enabled(capability, self.overrides)
    
    def enabled(self) -> set[Capability]:
        return self.config.enabled(self.overrides)
    
    def authenticatable(self) -> bool:
        return self.has(Capability.AUTHENTICATABLE)
    
    def registerable(self) -> bool:
        return self.has(Capability.REGISTERABLE)
    
    def confirmable(self) -> bool:
        return self.has(Capability.CONFIRMABLE)
    
    def trackable(self) -> bool:
        return self.has(Capability.TRACKABLE)
    
    def recoverable(self) -> bool:
        return self.has(Capability.RECOVERABLE)
    
    def lockable(self) -> bool:
        return self.has(Capability.LOCKABLE)
    
    def invitable(self) -> bool:
        return self.has(Capability.INVITABLE)
    
    def unlockable_with_token(self) -> bool:
        return self.has(Capability.UNLOCKABLE_WITH_TOKEN)
    
    def rememberable(self) -> bool:
        return self.has(Capability.REMEMBERABLE)
    
    def require(self, capability: Capability | str) -> None:
        """Raise CapabilityDisabled unless the capability is enabled."""
        if not self.has(capability):
            raise CapabilityDisabled(capability, self.name)
    
    # =========================================================================
    # Fields
    # =========================================================================
    
    def fields(self) -> list[FieldSpec]:
        """Catalog fields for this schema's capabilities."""
        return schema_fields(self.enabled())
    
    def field_names(self) -> list[str]:
        return coherence_fields(self.enabled())
    
    def entity_model(self, base: type[BaseModel] = BaseModel) -> type[BaseModel]:
        """A model class carrying exactly this schema's fields."""
        model_name = "".join(part.capitalize() for part in self.name.split("_"))
        return build_entity_model(model_name, self.enabled(), base=base)
    
    def changeset(
        self,
        entity: Any,
        params: dict[str, Any],
        allowed: list[str] | tuple[str, ...] = (),
    ) -> Changeset:
        """
        Cast params onto the entity's persisted fields and validate.
        
        `allowed` names the entity's own fields (name, email, ...); the
        capability fields are added automatically.
        """
        fields = [*allowed, *persisted_fields(self.enabled())]
        changeset = Changeset.cast(entity, params, fields)
        if self.authenticatable():
            changeset = self.validate_coherence(changeset, params)
        return changeset
    
    # =========================================================================
    # Authenticatable
    # =========================================================================
    
    def encrypt_password(self, plaintext: str) -> str:
        self.require(Capability.AUTHENTICATABLE)
        return password.encrypt_password(plaintext, self.settings.bcrypt_log_rounds)
    
    def checkpw(self, plaintext: str, encrypted: str | None) -> bool:
        self.require(Capability.AUTHENTICATABLE)
        return password.verify_password(plaintext, encrypted)
    
    def validate_coherence(self, changeset: Changeset, params: dict[str, Any]) -> Changeset:
        """Run the password validations using submitted params."""
        self.require(Capability.AUTHENTICATABLE)
        return password.validate_credential_change(
            params.get("password"),
            params.get("password_confirmation"),
            changeset,
            min_length=self.settings.password_min_length,
        )
    
    # =========================================================================
    # Confirmable
    # =========================================================================
    
    def confirmed(self, entity: Any) -> bool:
        self.require(Capability.CONFIRMABLE)
        return confirmable.is_confirmed(entity)
    
    def confirm(self, entity: Any, now: datetime | None = None) -> AttributeDelta:
        self.require(Capability.CONFIRMABLE)
        return confirmable.confirm(entity, now=now)
    
    def confirmation_expired(self, entity: Any, now: datetime | None = None) -> bool:
        self.require(Capability.CONFIRMABLE)
        return confirmable.confirmation_expired(
            entity, self.settings.confirmation_token_expire_days, now=now
        )
    
    # =========================================================================
    # Lockable
    # =========================================================================
    
    def locked(self, entity: Any, now: datetime | None = None) -> bool:
        self.require(Capability.LOCKABLE)
        return lockable.is_locked(entity, self.settings.unlock_timeout_minutes, now=now)
    
    def unlock(self, entity: Any) -> AttributeDelta:
        self.require(Capability.LOCKABLE)
        return lockable.unlock(entity)
    
    def failed_attempts(self, entity: Any) -> int:
        self.require(Capability.LOCKABLE)
        return lockable.failed_attempts(entity)
    
    # =========================================================================
    # Recoverable
    # =========================================================================
    
    def reset_password_expired(self, entity: Any, now: datetime | None = None) -> bool:
        self.require(Capability.RECOVERABLE)
        return recoverable.reset_password_expired(
            entity, self.settings.reset_token_expire_days, now=now
        )
    
    def clear_reset_password(self, entity: Any) -> AttributeDelta:
        self.require(Capability.RECOVERABLE)
        return recoverable.clear_reset_password(entity)
    
    # =========================================================================
    # Trackable
    # =========================================================================
    
    def track_sign_in(
        self,
        entity: Any,
        ip: str | None,
        now: datetime | None = None,
    ) -> AttributeDelta:
        self.require(Capability.TRACKABLE)
        return trackable.track_sign_in(entity, ip, now=now)
