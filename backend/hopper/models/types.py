"""
Custom SQLAlchemy Types

Provides a UTC-normalizing timestamp type and the commit timestamp
value written to CreatedAt/UpdatedAt.
"""
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime, TypeDecorator, func, literal_column

SPANNER_PENDING_COMMIT_TIMESTAMP = "SPANNER.PENDING_COMMIT_TIMESTAMP()"


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp stored and returned in UTC.

    SQLite drops tzinfo on the way in and out; naive values coming back
    from the driver are therefore treated as UTC.
    """
    impl = DateTime
    cache_ok = True

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("timezone", True)
        super().__init__(*args, **kwargs)

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


def commit_timestamp(source: str) -> Any:
    """
    Value for a commit timestamp column.

    - ``spanner``: Spanner's pending commit timestamp, resolved at commit.
    - ``server``: the database's CURRENT_TIMESTAMP.
    - ``client``: the local UTC clock, read once per call.

    Call once per write unit and reuse the result for every row and column
    in that unit.
    """
    if source == "spanner":
        return literal_column(SPANNER_PENDING_COMMIT_TIMESTAMP, type_=UTCDateTime())
    if source == "server":
        return func.current_timestamp(type_=UTCDateTime())
    if source == "client":
        return datetime.now(timezone.utc)
    raise ValueError(f"unknown commit timestamp source: {source}")
