"""
FastAPI dependencies wiring the store and services to a request session.
"""
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from hopper.database import get_db
from hopper.services.random_singers import RandomSingerService
from hopper.services.singers_store import SingersStore


def get_singers_store(request: Request, db: Session = Depends(get_db)) -> SingersStore:
    settings = request.app.state.settings
    return SingersStore(db, commit_timestamp_source=settings.commit_timestamp)


def get_random_singer_service(
    store: SingersStore = Depends(get_singers_store),
) -> RandomSingerService:
    return RandomSingerService(store)
