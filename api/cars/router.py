"""
Car API endpoints.
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


@router.get("/cars", response_model=list[schemas.Car])
async def list_cars(store: Store = Depends(get_store)) -> list[schemas.Car]:
    rows = await repository.list_cars(store)
    return [from_row(schemas.Car, row, table=repository.TABLE) for row in rows]


@router.post("/cars", response_model=schemas.Car)
async def create_car(
    request: schemas.CarCreate,
    store: Store = Depends(get_store),
) -> schemas.Car:
    row = await repository.insert_car(store, to_row(request))
    car = from_row(schemas.Car, row, table=repository.TABLE)
    logger.info("car_created id=%s owner_id=%s", car.id, car.owner_id)
    return car


@router.delete("/cars/{car_id}")
async def delete_car(car_id: int, store: Store = Depends(get_store)) -> dict:
    """
    Delete a car by id. Succeeds whether or not a row matched.
    """
    deleted = await repository.delete_car(store, car_id)
    logger.info("car_deleted id=%s matched=%s", car_id, deleted)
    return {"success": True}
