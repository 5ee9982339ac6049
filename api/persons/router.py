"""
Person API endpoints.
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


@router.get("/persons", response_model=list[schemas.Person])
async def list_persons(store: Store = Depends(get_store)) -> list[schemas.Person]:
    rows = await repository.list_persons(store)
    return [from_row(schemas.Person, row, table=repository.TABLE) for row in rows]


@router.post("/persons", response_model=schemas.Person)
async def create_person(
    request: schemas.PersonCreate,
    store: Store = Depends(get_store),
) -> schemas.Person:
    row = await repository.insert_person(store, to_row(request))
    person = from_row(schemas.Person, row, table=repository.TABLE)
    logger.info("person_created id=%s", person.id)
    return person


@router.delete("/persons/{person_id}")
async def delete_person(person_id: int, store: Store = Depends(get_store)) -> dict:
    deleted = await repository.delete_person(store, person_id)
    logger.info("person_deleted id=%s matched=%s", person_id, deleted)
    return {"success": True}
