"""Shared fixtures: cheap bcrypt and fresh process-wide singletons."""

import pytest

from warden.auth.capabilities import CapabilityConfig, reset_capability_config
from warden.config import Settings, get_settings
from warden.core.registry import reset_registry


@pytest.fixture(autouse=True)
def fast_settings(monkeypatch):
    """Minimum bcrypt cost and no leaked singletons between tests."""
    monkeypatch.setenv("WARDEN_BCRYPT_LOG_ROUNDS", "4")
    get_settings.cache_clear()
    reset_capability_config()
    reset_registry()
    yield
    get_settings.cache_clear()
    reset_capability_config()
    reset_registry()


@pytest.fixture
def settings():
    return Settings(bcrypt_log_rounds=4)


@pytest.fixture
def all_capabilities():
    """Every capability enabled globally."""
    return CapabilityConfig.from_options([
        "authenticatable", "registerable", "confirmable", "trackable",
        "recoverable", "lockable", "invitable", "unlockable_with_token",
        "rememberable",
    ])
