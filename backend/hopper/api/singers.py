"""
Singers API Router

Random write workload and read endpoints for the Singers table.
"""
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response

from hopper.api.dependencies import get_random_singer_service, get_singers_store
from hopper.exceptions import NotFoundError
from hopper.schemas.singer import (
    RandomInsertRequest,
    RandomUpdateRequest,
    SingerListResponse,
    SingerRecord,
)
from hopper.services.random_singers import RandomSingerService
from hopper.services.singers_store import SingersStore

router = APIRouter(prefix="/singers", tags=["singers"])


@router.post("/random-insert", status_code=201, response_class=Response)
def random_insert(
    body: RandomInsertRequest,
    service: RandomSingerService = Depends(get_random_singer_service),
) -> Response:
    """
    Insert **count** singers with random names in a single transaction.

    Returns 201 with an empty body.
    """
    service.random_insert(body.count)
    return Response(status_code=201)


@router.post("/random-update", status_code=200, response_class=Response)
def random_update(
    body: RandomUpdateRequest,
    service: RandomSingerService = Depends(get_random_singer_service),
) -> Response:
    """
    Rename one random singer created more than **oldDay** days ago.

    Returns 200 with an empty body, also when no singer qualified.
    """
    service.random_update(body.old_day)
    return Response(status_code=200)


@router.get("", response_model=SingerListResponse)
def list_singers(
    store: SingersStore = Depends(get_singers_store),
) -> SingerListResponse:
    """Get all singers (unpaginated)."""
    singers = store.list()
    return SingerListResponse(items=singers, total=len(singers))


# The uuid convertor keeps /singers/random-insert from matching this route
@router.get("/{singer_id:uuid}", response_model=SingerRecord)
def get_singer(
    singer_id: UUID,
    store: SingersStore = Depends(get_singers_store),
) -> SingerRecord:
    """Get a single singer by ID."""
    try:
        return store.get(str(singer_id))
    except NotFoundError:
        raise HTTPException(status_code=404, detail="singer not found")
