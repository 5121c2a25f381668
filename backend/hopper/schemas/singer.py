"""
Singer Schemas

Pydantic models for Singer records and the random-write endpoints.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


class SingerBase(BaseModel):
    """Mutable singer fields"""
    first_name: str = Field(..., max_length=1024)
    last_name: str = Field(..., max_length=1024)


class SingerRecord(SingerBase):
    """
    A Singer as read from or written to the store.

    singer_id is assigned by the store on insert; created_at and updated_at
    are only populated on records read back from the database.
    """
    singer_id: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SingerListResponse(BaseModel):
    """List of singers response"""
    items: List[SingerRecord]
    total: int


class RandomInsertRequest(BaseModel):
    """Body of POST /singers/random-insert"""
    count: StrictInt = Field(0, validate_default=True)

    @field_validator("count")
    @classmethod
    def count_must_be_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"count must be greater than 0. got {value}")
        return value


class RandomUpdateRequest(BaseModel):
    """Body of POST /singers/random-update"""
    old_day: StrictInt = Field(0, alias="oldDay", validate_default=True)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("old_day")
    @classmethod
    def old_day_must_be_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"oldDay must be greater than 0. got {value}")
        return value
