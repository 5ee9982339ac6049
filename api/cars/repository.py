"""
Car persistence (`cars` table).
"""

from __future__ import annotations

from typing import Any

from core.store import Store

TABLE = "cars"


async def list_cars(store: Store) -> list[dict[str, Any]]:
    return await store.select(TABLE, order_by="id")


async def insert_car(store: Store, row: dict[str, Any]) -> dict[str, Any]:
    return await store.insert(TABLE, row)


async def delete_car(store: Store, car_id: int) -> int:
    return await store.delete(TABLE, filters={"id": car_id})
