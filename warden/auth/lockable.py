"""
Lockable state.

A lock is only honoured for unlock_timeout_minutes after locked_at. After
that the entity reads as unlocked, although locked_at and unlock_token
stay stored until unlock() clears them.

Setting locked_at when failed_attempts crosses a threshold is left to the
login flow; this module only answers queries and produces the unlock delta.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from warden.core.models import AttributeDelta
from warden.core.utils import expired, get_attr


def is_locked(
    entity: Any,
    unlock_timeout_minutes: int,
    now: datetime | None = None,
) -> bool:
    """Is the entity locked right now?"""
    locked_at = get_attr(entity, "locked_at")
    if locked_at is None:
        return False
    return not expired(locked_at, minutes=unlock_timeout_minutes, now=now)


def unlock(entity: Any) -> AttributeDelta:
    """Delta that clears the lock. Safe to apply to an unlocked entity."""
    return AttributeDelta(changes={"locked_at": None, "unlock_token": None})


def failed_attempts(entity: Any) -> int:
    """Failed login count, as stored."""
    return get_attr(entity, "failed_attempts") or 0
