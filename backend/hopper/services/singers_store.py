"""
Singers Store

Maps SingerRecord values to rows of the Singers table. Every operation
is its own transaction and round-trips to the database.
"""
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Iterable, List

from sqlalchemy import insert, select, update
from pydantic import ValidationError as RowValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hopper.exceptions import NotFoundError, PersistenceError
from hopper.models import Singer, commit_timestamp
from hopper.schemas.singer import SingerRecord

logger = logging.getLogger(__name__)

singers_table = Singer.__table__


class SingersStore:
    """Store for the Singers table"""

    def __init__(self, db: Session, commit_timestamp_source: str = "spanner"):
        self.db = db
        self.commit_timestamp_source = commit_timestamp_source

    def insert(self, singer: SingerRecord) -> None:
        """Insert one singer with a freshly assigned SingerID"""
        self._insert_rows("SingersStore.Insert", [singer])

    def batch_insert(self, singers: Iterable[SingerRecord]) -> None:
        """
        Insert singers in a single transaction.

        Each singer gets a new SingerID. Either every row is written or none.
        """
        self._insert_rows("SingersStore.BatchInsert", list(singers))

    def get(self, singer_id: str) -> SingerRecord:
        """Get a singer by primary key"""
        operation = "SingersStore.Get"
        query = select(Singer).where(Singer.singer_id == singer_id)
        try:
            row = self.db.execute(query).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise PersistenceError(operation, "failed to read row", e) from e

        if row is None:
            raise NotFoundError(singer_id, operation)
        return self._to_records(operation, [row])[0]

    def list(self) -> List[SingerRecord]:
        """Get all singers in storage order"""
        operation = "SingersStore.List"
        try:
            rows = self.db.execute(select(Singer)).scalars().all()
        except SQLAlchemyError as e:
            raise PersistenceError(operation, "failed to read rows", e) from e
        return self._to_records(operation, rows)

    def list_by_created_at(self, old_day: int, limit: int) -> List[SingerRecord]:
        """
        Get up to ``limit`` singers created before ``old_day`` days ago.

        Results are ordered by CreatedAt, newest first. ``old_day == 0``
        uses the current time as the cutoff.
        """
        operation = "SingersStore.ListByCreatedAt"
        cutoff = datetime.now(timezone.utc)
        if old_day != 0:
            cutoff = cutoff - timedelta(days=old_day)

        query = (
            select(Singer)
            .where(Singer.created_at < cutoff)
            .order_by(Singer.created_at.desc())
            .limit(limit)
        )
        try:
            rows = self.db.execute(query).scalars().all()
        except SQLAlchemyError as e:
            raise PersistenceError(
                operation, "failed to query rows", e
            ) from e

        logger.debug(f"ListByCreatedAt: cutoff={cutoff.isoformat()} found={len(rows)}")
        return self._to_records(operation, rows)

    def update(self, singer: SingerRecord) -> None:
        """
        Overwrite FirstName, LastName and UpdatedAt of an existing singer.

        SingerID and CreatedAt are left untouched.
        """
        operation = "SingersStore.Update"
        stmt = (
            update(singers_table)
            .where(singers_table.c.singer_id == singer.singer_id)
            .values(
                first_name=singer.first_name,
                last_name=singer.last_name,
                updated_at=commit_timestamp(self.commit_timestamp_source),
            )
        )
        try:
            result = self.db.execute(stmt)
            if result.rowcount == 0:
                self.db.rollback()
                raise NotFoundError(singer.singer_id, operation)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(operation, "failed to apply mutation", e) from e

        logger.debug(f"Updated singer {singer.singer_id}")

    def _insert_rows(self, operation: str, singers: List[SingerRecord]) -> None:
        if not singers:
            return

        for singer in singers:
            singer.singer_id = str(uuid.uuid4())

        # One timestamp value for every row and both columns of the write
        ts = commit_timestamp(self.commit_timestamp_source)
        stmt = insert(singers_table).values(created_at=ts, updated_at=ts)
        params = [
            {
                "singer_id": s.singer_id,
                "first_name": s.first_name,
                "last_name": s.last_name,
            }
            for s in singers
        ]
        try:
            self.db.execute(stmt, params)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(operation, "failed to apply mutation", e) from e

        logger.debug(f"{operation}: inserted {len(singers)} singers")

    @staticmethod
    def _to_records(operation: str, rows) -> List[SingerRecord]:
        try:
            return [SingerRecord.model_validate(r) for r in rows]
        except RowValidationError as e:
            raise PersistenceError(operation, "failed to convert row", e) from e
