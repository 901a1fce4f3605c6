"""
Confirmable state.

An entity is unconfirmed while it holds a confirmation token and has no
confirmed_at. Confirming consumes the token.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from warden.core.models import AttributeDelta
from warden.core.utils import expired, get_attr, utc_now


def is_confirmed(entity: Any) -> bool:
    """Has the entity been confirmed?"""
    return get_attr(entity, "confirmed_at") is not None


def confirm(entity: Any, now: datetime | None = None) -> AttributeDelta:
    """
    Delta that marks the entity confirmed and clears its token.
    
    Re-confirming an already confirmed entity just moves confirmed_at.
    """
    return AttributeDelta(changes={
        "confirmed_at": now or utc_now(),
        "confirmation_token": None,
    })


def confirmation_expired(
    entity: Any,
    days: int,
    now: datetime | None = None,
) -> bool:
    """Has the confirmation sent to this entity gone stale?"""
    return expired(get_attr(entity, "confirmation_send_at"), days=days, now=now)
