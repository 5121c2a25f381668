"""
Services Package

Business logic layer for the API.
"""
from hopper.services.singers_store import SingersStore
from hopper.services.random_singers import RandomSingerService, UPDATE_CANDIDATE_LIMIT

__all__ = [
    "SingersStore",
    "RandomSingerService",
    "UPDATE_CANDIDATE_LIMIT",
]
