"""
Commute API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from core.dependencies import get_store
from core.schemas import from_row, to_row
from core.store import Store

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/commutes", response_model=list[schemas.Commute])
async def list_commutes(store: Store = Depends(get_store)) -> list[schemas.Commute]:
    rows = await repository.list_commutes(store)
    return [from_row(schemas.Commute, row, table=repository.TABLE) for row in rows]


@router.post("/commutes", response_model=schemas.Commute)
async def create_commute(
    request: schemas.CommuteCreate,
    store: Store = Depends(get_store),
) -> schemas.Commute:
    # One insert carries the id lists too, so a failure leaves nothing behind.
    row = await repository.insert_commute(store, to_row(request))
    commute = from_row(schemas.Commute, row, table=repository.TABLE)
    logger.info(
        "commute_created id=%s date=%s trip_type=%s cars=%s persons=%s",
        commute.id,
        commute.date,
        commute.trip_type,
        len(commute.selected_cars or []),
        len(commute.selected_persons or []),
    )
    return commute


@router.delete("/commutes/{commute_id}")
async def delete_commute(commute_id: int, store: Store = Depends(get_store)) -> dict:
    deleted = await repository.delete_commute(store, commute_id)
    logger.info("commute_deleted id=%s matched=%s", commute_id, deleted)
    return {"success": True}
