"""
Commute persistence (`commutes` table).
"""

from __future__ import annotations

from typing import Any

from core.store import Store

TABLE = "commutes"


async def list_commutes(store: Store) -> list[dict[str, Any]]:
    """
    Newest first.
    """
    return await store.select(TABLE, order_by="date", ascending=False)


async def insert_commute(store: Store, row: dict[str, Any]) -> dict[str, Any]:
    return await store.insert(TABLE, row)


async def delete_commute(store: Store, commute_id: int) -> int:
    return await store.delete(TABLE, filters={"id": commute_id})
