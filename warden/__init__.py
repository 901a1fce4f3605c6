"""
warden - per-entity credential capabilities.

Decides which credential features (password auth, confirmation, locking,
recovery, tracking, ...) an account-holder type has, and enforces their
state rules.
"""

from warden.schema import CredentialSchema

__version__ = "0.1.0"

__all__ = ["CredentialSchema", "__version__"]
