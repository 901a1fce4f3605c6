"""
Capabilities and their resolution.

This defines WHICH credential features an entity type has, not HOW they
behave. The behavior lives in password.py, confirmable.py, lockable.py
and friends.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping

from warden.config import Settings, get_settings


class Capability(str, Enum):
    """Independently toggleable credential-management features."""
    
    AUTHENTICATABLE = "authenticatable"
    REGISTERABLE = "registerable"
    CONFIRMABLE = "confirmable"
    TRACKABLE = "trackable"
    RECOVERABLE = "recoverable"
    LOCKABLE = "lockable"
    INVITABLE = "invitable"
    UNLOCKABLE_WITH_TOKEN = "unlockable_with_token"
    REMEMBERABLE = "rememberable"


class CapabilityDisabled(Exception):
    """Raised when a gated operation is used without its capability."""
    
    def __init__(self, capability: Capability | str, schema: str | None = None):
        self.capability = _coerce(capability) or capability
        self.schema = schema
        name = getattr(self.capability, "value", self.capability)
        where = f" for '{schema}'" if schema else ""
        super().__init__(f"Capability '{name}' is not enabled{where}")


def _coerce(capability: Capability | str) -> Capability | None:
    if isinstance(capability, Capability):
        return capability
    try:
        return Capability(capability)
    except ValueError:
        return None


def normalize_overrides(
    overrides: Mapping[Capability | str, bool] | None,
) -> dict[Capability, bool]:
    """
    Key overrides by Capability, dropping names we don't know.

    Raises:
        TypeError: An override value is not a real bool
    """
    result: dict[Capability, bool] = {}
    for key, value in (overrides or {}).items():
        if not isinstance(value, bool):
            raise TypeError(
                f"Override for '{key}' must be a bool, got {type(value).__name__}"
            )
        cap = _coerce(key)
        if cap is not None:
            result[cap] = value
    return result


class CapabilityConfig:
    """
    Process-wide capability defaults.
    
    Resolution for an entity type is
    ``global_defaults[cap] and local_overrides.get(cap, True)``,
    so local overrides can switch a capability off but never on.
    
    Usage:
        config = CapabilityConfig.from_settings(get_settings())
        if config.is_enabled("lockable", {"lockable": False}):
            ...
    """
    
    def __init__(self, global_defaults: Mapping[Capability | str, bool] | None = None):
        self._defaults: dict[Capability, bool] = normalize_overrides(global_defaults)
    
    @classmethod
    def from_settings(cls, settings: Settings) -> CapabilityConfig:
        return cls.from_options(settings.opts_list)
    
    @classmethod
    def from_options(cls, options: list[Capability | str]) -> CapabilityConfig:
        return cls({option: True for option in options})
    
    @property
    def global_defaults(self) -> dict[Capability, bool]:
        return dict(self._defaults)
    
    def has_option(self, capability: Capability | str) -> bool:
        """Is the capability enabled globally?"""
        cap = _coerce(capability)
        if cap is None:
            return False
        return self._defaults.get(cap, False)
    
    def is_enabled(
        self,
        capability: Capability | str,
        local_overrides: Mapping[Capability | str, bool] | None = None,
    ) -> bool:
        """Resolve a capability for an entity type. Never raises."""
        cap = _coerce(capability)
        if cap is None or not self.has_option(cap):
            return False
        return normalize_overrides(local_overrides).get(cap, True)
    
    def enabled(
        self,
        local_overrides: Mapping[Capability | str, bool] | None = None,
    ) -> set[Capability]:
        """All capabilities resolved as enabled."""
        return {cap for cap in Capability if self.is_enabled(cap, local_overrides)}
    
    def __repr__(self) -> str:
        on = sorted(cap.value for cap, value in self._defaults.items() if value)
        return f"CapabilityConfig({on})"


# Built lazily from settings the first time it is needed
_default_config: CapabilityConfig | None = None


def get_capability_config() -> CapabilityConfig:
    """Get the process-wide capability config."""
    global _default_config
    if _default_config is None:
        _default_config = CapabilityConfig.from_settings(get_settings())
    return _default_config


def reset_capability_config() -> None:
    """Reset the process-wide config (useful for testing)."""
    global _default_config
    _default_config = None
