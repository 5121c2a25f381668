"""
SQLAlchemy ORM Models

Export all models for easy importing.
"""
from hopper.models.types import UTCDateTime, commit_timestamp
from hopper.models.singer import Singer, SINGERS_TABLE_NAME, SINGERS_PK

__all__ = [
    "UTCDateTime",
    "commit_timestamp",
    "Singer",
    "SINGERS_TABLE_NAME",
    "SINGERS_PK",
]
