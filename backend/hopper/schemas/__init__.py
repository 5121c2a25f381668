"""
Pydantic Schemas

Request and response models for the API.
"""
from hopper.schemas.singer import (
    SingerBase,
    SingerRecord,
    SingerListResponse,
    RandomInsertRequest,
    RandomUpdateRequest,
)

__all__ = [
    "SingerBase",
    "SingerRecord",
    "SingerListResponse",
    "RandomInsertRequest",
    "RandomUpdateRequest",
]
