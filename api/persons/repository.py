"""
Person persistence (`persons` table).
"""

from __future__ import annotations

from typing import Any

from core.store import Store

TABLE = "persons"


async def list_persons(store: Store) -> list[dict[str, Any]]:
    return await store.select(TABLE, order_by="id")


async def insert_person(store: Store, row: dict[str, Any]) -> dict[str, Any]:
    return await store.insert(TABLE, row)


async def delete_person(store: Store, person_id: int) -> int:
    return await store.delete(TABLE, filters={"id": person_id})
