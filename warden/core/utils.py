"""
Shared utility functions for warden.

Time helpers and attribute access used by every state module.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any


def generate_id(prefix: str = "") -> str:
    """
    Generate a unique ID with optional prefix.

    Args:
        prefix: Optional prefix (e.g., "user", "admin")

    Returns:
        A unique ID like "user_a1b2c3d4e5f6"
    """
    uid = str(uuid.uuid4())[:12]
    return f"{prefix}_{uid}" if prefix else uid


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def expired(
    timestamp: datetime | None,
    *,
    minutes: int = 0,
    days: int = 0,
    now: datetime | None = None,
) -> bool:
    """
    Has the window starting at `timestamp` elapsed?

    A missing timestamp counts as expired. The window is half-open, so a
    timestamp exactly `minutes`/`days` old is expired.
    """
    if timestamp is None:
        return True
    now = as_utc(now or utc_now())
    return now - as_utc(timestamp) >= timedelta(minutes=minutes, days=days)


def get_attr(entity: Any, name: str, default: Any = None) -> Any:
    """Read an attribute from a model, plain object, or dict."""
    if isinstance(entity, dict):
        return entity.get(name, default)
    return getattr(entity, name, default)
