"""Tests for the field catalog and entity model builder."""

from datetime import datetime

import pytest
from pydantic import BaseModel

from warden.auth.capabilities import Capability
from warden.core.fields import (
    FIELD_CATALOG,
    build_entity_model,
    coherence_fields,
    persisted_fields,
    schema_fields,
)
from warden.core.models import CredentialEntity


class TestCatalog:
    def test_capabilities_without_fields(self):
        for cap in (
            Capability.REGISTERABLE,
            Capability.INVITABLE,
            Capability.UNLOCKABLE_WITH_TOKEN,
        ):
            assert cap not in FIELD_CATALOG
            assert schema_fields([cap]) == []

    def test_authenticatable_virtual_fields(self):
        specs = {s.name: s for s in schema_fields([Capability.AUTHENTICATABLE])}
        
        assert not specs["encrypted_password"].virtual
        assert specs["password"].virtual
        assert specs["password_confirmation"].virtual

    def test_lockable_order_and_defaults(self):
        specs = schema_fields([Capability.LOCKABLE])
        
        assert [s.name for s in specs] == ["failed_attempts", "unlock_token", "locked_at"]
        assert specs[0].type == "integer"
        assert specs[0].default == 0

    def test_catalog_order_independent_of_input(self):
        forward = coherence_fields([Capability.CONFIRMABLE, Capability.AUTHENTICATABLE])
        backward = coherence_fields([Capability.AUTHENTICATABLE, Capability.CONFIRMABLE])
        
        assert forward == backward
        assert forward[0] == "encrypted_password"

    def test_persisted_drops_virtual(self):
        names = persisted_fields([Capability.AUTHENTICATABLE, Capability.RECOVERABLE])
        
        assert names == [
            "encrypted_password",
            "reset_password_token",
            "reset_password_sent_at",
        ]

    def test_every_field_on_full_entity(self):
        names = coherence_fields(list(Capability))
        
        assert set(names) <= set(CredentialEntity.model_fields)


class TestBuildEntityModel:
    def test_exact_fields(self):
        User = build_entity_model("User", {Capability.LOCKABLE, Capability.CONFIRMABLE})
        
        assert set(User.model_fields) == {
            "failed_attempts", "unlock_token", "locked_at",
            "confirmation_token", "confirmed_at", "confirmation_send_at",
        }

    def test_defaults(self):
        User = build_entity_model("User", {Capability.TRACKABLE})
        user = User()
        
        assert user.sign_in_count == 0
        assert user.current_sign_in_at is None

    def test_virtual_not_dumped(self):
        User = build_entity_model("User", {Capability.AUTHENTICATABLE})
        user = User(encrypted_password="x", password="abcd", password_confirmation="abcd")
        
        assert user.password == "abcd"
        assert user.model_dump() == {"encrypted_password": "x"}

    def test_base_fields_kept(self):
        class Base(BaseModel):
            id: str
            email: str
        
        User = build_entity_model("User", {Capability.LOCKABLE}, base=Base)
        user = User(id="u1", email="a@example.com", locked_at=datetime(2024, 1, 1))
        
        assert user.id == "u1"
        assert isinstance(user.locked_at, datetime)

    def test_types_validated(self):
        User = build_entity_model("User", {Capability.TRACKABLE})
        
        with pytest.raises(ValueError):
            User(sign_in_count="many")
