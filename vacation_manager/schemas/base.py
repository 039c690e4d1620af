"""
Base schema classes with custom serialization.

Timestamps are stored as naive UTC (see models/base.py). They are emitted
the way the browser client's Date parser expects: ISO 8601 with
milliseconds and a trailing "Z". Calendar dates stay plain YYYY-MM-DD.
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer


def serialize_datetime_utc(dt: datetime | None) -> str | None:
    """Serialize a datetime as "2025-12-08T09:01:16.715Z"."""
    if dt is None:
        return None

    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)

    formatted = dt.strftime("%Y-%m-%dT%H:%M:%S")
    ms = dt.microsecond // 1000
    return f"{formatted}.{ms:03d}Z"


# Annotated type for Pydantic v2 serialization
DateTimeUTC = Annotated[datetime, PlainSerializer(serialize_datetime_utc, return_type=str)]


class BaseSchema(BaseModel):
    """
    Base schema class with standard configuration.
    Use DateTimeUTC for timestamp fields.
    """

    model_config = ConfigDict(
        from_attributes=True,
    )
