"""Shared fixtures: an in-memory store and an HTTP client bound to the app."""

import os
from typing import Any, Mapping

# Never point tests at a real project.
os.environ.setdefault("SUPABASE_URL", "http://store.test")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")

import pytest
from httpx import ASGITransport, AsyncClient

from core.store import StoreError
from main import create_app


class FakeStore:
    """In-memory `Store` with per-table id sequences and failure injection."""

    def __init__(self) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self._next_id: dict[str, int] = {}
        self.fail_with: str | None = None
        self.calls: list[tuple[str, str]] = []

    def _check(self, op: str, table: str) -> None:
        self.calls.append((op, table))
        if self.fail_with is not None:
            raise StoreError(self.fail_with, code="XX000")

    def seed(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        rows = self.tables.setdefault(table, [])
        row = dict(row)
        if "id" not in row:
            row["id"] = self._next_id.get(table, 1)
        self._next_id[table] = max(self._next_id.get(table, 1), row["id"] + 1)
        rows.append(row)
        return row

    async def select(
        self,
        table: str,
        *,
        order_by: str | None = None,
        ascending: bool = True,
        filters: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        self._check("select", table)
        rows = [
            dict(r)
            for r in self.tables.get(table, [])
            if all(r.get(k) == v for k, v in (filters or {}).items())
        ]
        if order_by:
            rows.sort(key=lambda r: r[order_by], reverse=not ascending)
        return rows

    async def insert(self, table: str, row: Mapping[str, Any]) -> dict[str, Any]:
        self._check("insert", table)
        return dict(self.seed(table, dict(row)))

    async def delete(self, table: str, *, filters: Mapping[str, Any]) -> int:
        self._check("delete", table)
        rows = self.tables.get(table, [])
        kept = [r for r in rows if not all(r.get(k) == v for k, v in filters.items())]
        self.tables[table] = kept
        return len(rows) - len(kept)


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
