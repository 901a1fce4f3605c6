"""Trackable state: sign-in counters and timestamps."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from warden.core.models import AttributeDelta
from warden.core.utils import get_attr, utc_now


def track_sign_in(
    entity: Any,
    ip: str | None,
    now: datetime | None = None,
) -> AttributeDelta:
    """
    Delta recording a successful sign-in.
    
    The previous current_* values move to last_*; on the first sign-in
    last_* mirrors the new values.
    """
    now = now or utc_now()
    current_at = get_attr(entity, "current_sign_in_at")
    current_ip = get_attr(entity, "current_sign_in_ip")
    
    return AttributeDelta(changes={
        "sign_in_count": (get_attr(entity, "sign_in_count") or 0) + 1,
        "last_sign_in_at": current_at or now,
        "last_sign_in_ip": current_ip or ip,
        "current_sign_in_at": now,
        "current_sign_in_ip": ip,
    })
