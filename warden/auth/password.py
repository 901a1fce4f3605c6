# =============================================================================
# Password Credentials
# =============================================================================
#
# Everything the authenticatable capability does with passwords:
#   - Hashing (bcrypt, fresh salt per call)
#   - Verification (never raises)
#   - Validating a password change on a changeset
#
# =============================================================================

from __future__ import annotations

import logging

import bcrypt

from warden.config import get_settings
from warden.core.models import (
    Changeset,
    PasswordConfirmationMismatch,
    PasswordTooShort,
)

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of input; anything past that
# (including the tail of a split multi-byte character) is ignored
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


# =============================================================================
# Hashing
# =============================================================================

def encrypt_password(password: str, rounds: int | None = None) -> str:
    """
    Hash a password with bcrypt.
    
    Every call draws a new salt, so hashing the same password twice gives
    two different strings that both verify.
    """
    rounds = rounds or get_settings().bcrypt_log_rounds
    hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, encrypted_password: str | None) -> bool:
    """
    Verify a password against its hash.
    
    A corrupt, missing or foreign hash is a rejected login, not an error.
    """
    try:
        return bcrypt.checkpw(
            _password_bytes(password),
            encrypted_password.encode("utf-8"),
        )
    except (ValueError, TypeError, AttributeError) as e:
        logger.debug("Password check failed against malformed hash: %s", e)
        return False


# =============================================================================
# Validation
# =============================================================================

def validate_credential_change(
    password: str | None,
    password_confirmation: str | None,
    changeset: Changeset,
    min_length: int | None = None,
) -> Changeset:
    """
    Validate a password change and set encrypted_password when it passes.
    
    Password is optional per update: with no new password the changeset
    comes back untouched, and an empty string counts as no new password.
    A missing or empty confirmation is not checked. Errors are
    attached to the changeset rather than raised.
    
    Args:
        password: New plaintext password, if one was submitted
        password_confirmation: Its confirmation, if one was submitted
        changeset: The changeset being validated
        min_length: Override for Settings.password_min_length
    
    Returns:
        A new changeset, possibly with PasswordTooShort and/or
        PasswordConfirmationMismatch errors
    """
    # A blank password field means "keep the current one"
    if password is None or password == "":
        return changeset
    
    if min_length is None:
        min_length = get_settings().password_min_length
    
    if len(password) < min_length:
        changeset = changeset.add_error(PasswordTooShort(min_length=min_length))
    
    if password_confirmation not in (None, "") and password_confirmation != password:
        changeset = changeset.add_error(PasswordConfirmationMismatch())
    
    if changeset.valid:
        changeset = changeset.put_change("encrypted_password", encrypt_password(password))
    
    return changeset
