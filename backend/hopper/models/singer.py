"""
Singer Model

The Singers table. Column names are mixed case and quoted; attribute and
column keys are snake_case.
"""
from sqlalchemy import Column, String

from hopper.database import Base
from hopper.models.types import UTCDateTime

SINGERS_TABLE_NAME = "Singers"
SINGERS_PK = "SingerID"


class Singer(Base):
    """
    Singer

    SingerID is a server-generated UUID. CreatedAt is written once at insert,
    UpdatedAt at every insert and update.
    """
    __tablename__ = SINGERS_TABLE_NAME

    singer_id = Column(SINGERS_PK, String, primary_key=True, key="singer_id")
    first_name = Column("FirstName", String(1024), key="first_name")
    last_name = Column("LastName", String(1024), key="last_name")
    created_at = Column("CreatedAt", UTCDateTime(), nullable=False, key="created_at")
    updated_at = Column("UpdatedAt", UTCDateTime(), nullable=False, key="updated_at")

    def __repr__(self):
        return f"<Singer(singer_id={self.singer_id}, first_name={self.first_name}, last_name={self.last_name})>"
