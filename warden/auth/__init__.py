"""
Credential capabilities and their state rules.

Design principles:
1. Capabilities resolve from global defaults, narrowed per entity type
2. State functions read entity attributes and never write them
3. Transitions return deltas for the repository to persist
4. Failures are data (False, changeset errors), not exceptions
"""

from warden.auth.capabilities import (
    Capability,
    CapabilityConfig,
    CapabilityDisabled,
    get_capability_config,
    reset_capability_config,
)
from warden.auth.password import (
    encrypt_password,
    verify_password,
    validate_credential_change,
)
from warden.auth.confirmable import (
    confirm,
    confirmation_expired,
    is_confirmed,
)
from warden.auth.lockable import (
    failed_attempts,
    is_locked,
    unlock,
)
from warden.auth.recoverable import (
    clear_reset_password,
    reset_password_expired,
)
from warden.auth.trackable import track_sign_in

__all__ = [
    # Capabilities
    "Capability",
    "CapabilityConfig",
    "CapabilityDisabled",
    "get_capability_config",
    "reset_capability_config",
    # Passwords
    "encrypt_password",
    "verify_password",
    "validate_credential_change",
    # Confirmable
    "confirm",
    "confirmation_expired",
    "is_confirmed",
    # Lockable
    "failed_attempts",
    "is_locked",
    "unlock",
    # Recoverable
    "clear_reset_password",
    "reset_password_expired",
    # Trackable
    "track_sign_in",
]
