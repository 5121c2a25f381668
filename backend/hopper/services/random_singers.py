"""
Random Singer Service

Generates random singers and random updates against the SingersStore.
"""
import logging
import random
import uuid
from typing import List, Optional

from hopper.exceptions import ValidationError
from hopper.schemas.singer import SingerRecord
from hopper.services.random_names import random_first_name, random_last_name
from hopper.services.singers_store import SingersStore

logger = logging.getLogger(__name__)

# Number of update candidates fetched per random update
UPDATE_CANDIDATE_LIMIT = 10


class RandomSingerService:
    """Service class for the random insert/update workload"""

    def __init__(self, store: SingersStore, rng: Optional[random.Random] = None):
        self.store = store
        self.rng = rng or random.Random()

    def random_insert(self, count: int) -> List[SingerRecord]:
        """
        Insert ``count`` singers with random names in one batch.

        Returns the inserted records with their store-assigned SingerIDs.
        """
        if count < 1:
            raise ValidationError(f"count must be greater than 0. got {count}")

        # The store replaces these ids on insert
        singers = [
            SingerRecord(
                singer_id=str(uuid.uuid4()),
                first_name=random_first_name(self.rng),
                last_name=random_last_name(self.rng),
            )
            for _ in range(count)
        ]
        self.store.batch_insert(singers)

        logger.info(f"Inserted {count} random singers")
        return singers

    def random_update(self, old_day: int) -> Optional[SingerRecord]:
        """
        Rename one random singer created more than ``old_day`` days ago.

        Returns the updated singer, or None when no singer is old enough.
        """
        if old_day < 1:
            raise ValidationError(f"oldDay must be greater than 0. got {old_day}")

        candidates = self.store.list_by_created_at(old_day, UPDATE_CANDIDATE_LIMIT)
        if not candidates:
            logger.info(f"No singers older than {old_day} days, nothing to update")
            return None

        singer = self.rng.choice(candidates)
        current = (singer.first_name, singer.last_name)
        new_name = current
        while new_name == current:
            new_name = (random_first_name(self.rng), random_last_name(self.rng))
        singer.first_name, singer.last_name = new_name
        self.store.update(singer)

        logger.info(f"Updated singer {singer.singer_id}")
        return singer
