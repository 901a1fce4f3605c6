"""Recoverable state: password reset token freshness."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from warden.core.models import AttributeDelta
from warden.core.utils import expired, get_attr


def reset_password_expired(
    entity: Any,
    days: int,
    now: datetime | None = None,
) -> bool:
    """True when no reset was sent or the reset token is older than `days`."""
    return expired(get_attr(entity, "reset_password_sent_at"), days=days, now=now)


def clear_reset_password(entity: Any) -> AttributeDelta:
    return AttributeDelta(changes={
        "reset_password_token": None,
        "reset_password_sent_at": None,
    })
