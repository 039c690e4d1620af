"""
Shared column helpers for models.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Naive UTC timestamp; columns are TIMESTAMP WITHOUT TIME ZONE stored as UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
