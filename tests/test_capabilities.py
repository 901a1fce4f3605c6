"""
Tests for capability resolution.

Core principle: global defaults grant, local overrides only narrow.
"""

import pytest

from warden.auth.capabilities import (
    Capability,
    CapabilityConfig,
    CapabilityDisabled,
    get_capability_config,
)
from warden.config import Settings


# =============================================================================
# Resolution Tests
# =============================================================================


class TestIsEnabled:
    def test_enabled_globally_no_override(self):
        config = CapabilityConfig.from_options(["lockable"])
        
        assert config.is_enabled("lockable") is True
        assert config.is_enabled(Capability.LOCKABLE, {}) is True

    def test_override_can_narrow(self):
        config = CapabilityConfig.from_options(["lockable", "confirmable"])
        
        assert config.is_enabled("lockable", {"lockable": False}) is False
        assert config.is_enabled("confirmable", {"lockable": False}) is True

    @pytest.mark.parametrize("cap", list(Capability))
    def test_override_never_grants(self, cap):
        config = CapabilityConfig.from_options([])
        
        assert config.is_enabled(cap, {cap: True}) is False
        assert config.is_enabled(cap.value, {cap.value: True}) is False

    def test_globally_false_stays_false(self):
        config = CapabilityConfig({"invitable": False})
        
        assert config.has_option("invitable") is False
        assert config.is_enabled("invitable", {"invitable": True}) is False

    def test_unknown_name_is_false(self):
        config = CapabilityConfig.from_options(["lockable"])
        
        assert config.is_enabled("teleportable") is False
        assert config.has_option("teleportable") is False

    def test_unknown_override_keys_ignored(self):
        config = CapabilityConfig.from_options(["lockable"])
        
        assert config.is_enabled("lockable", {"bogus": False}) is True

    def test_string_override_rejected(self):
        config = CapabilityConfig.from_options(["lockable"])

        with pytest.raises(TypeError):
            config.is_enabled("lockable", {"lockable": "false"})

    def test_enabled_set(self):
        config = CapabilityConfig.from_options(["lockable", "trackable", "confirmable"])
        
        assert config.enabled({"trackable": False}) == {
            Capability.LOCKABLE,
            Capability.CONFIRMABLE,
        }

    def test_repeated_calls_agree(self):
        config = CapabilityConfig.from_options(["recoverable"])
        overrides = {"recoverable": True}
        
        results = {config.is_enabled("recoverable", overrides) for _ in range(5)}
        assert results == {True}


# =============================================================================
# Settings Tests
# =============================================================================


class TestFromSettings:
    def test_opts_parsed(self):
        settings = Settings(opts="authenticatable, lockable,,")
        config = CapabilityConfig.from_settings(settings)
        
        assert config.has_option("authenticatable")
        assert config.has_option("lockable")
        assert not config.has_option("confirmable")

    def test_env_opts(self, monkeypatch):
        monkeypatch.setenv("WARDEN_OPTS", "confirmable")
        
        config = get_capability_config()
        
        assert config.has_option("confirmable")
        assert not config.has_option("authenticatable")

    def test_singleton(self):
        assert get_capability_config() is get_capability_config()

    def test_global_defaults_is_a_copy(self):
        config = CapabilityConfig.from_options(["lockable"])
        config.global_defaults[Capability.INVITABLE] = True
        
        assert config.has_option("invitable") is False


class TestCapabilityDisabled:
    def test_message(self):
        err = CapabilityDisabled("lockable", "admin")
        
        assert err.capability == Capability.LOCKABLE
        assert "lockable" in str(err)
        assert "admin" in str(err)
