"""
Hosted table store (Supabase / PostgREST) over httpx.

Used endpoints (relative to `{SUPABASE_URL}/rest/v1`):
- GET    /{table}?select=*&order=col.asc&col=eq.value  -> [row, ...]
- POST   /{table}  body=[row]                          -> [inserted row]
- DELETE /{table}?col=eq.value                         -> [deleted row, ...]

Handlers depend on the `Store` protocol, not on this client, so tests can
pass an in-memory implementation.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol

import httpx

REST_PATH = "/rest/v1"


# Store failures are explicit and separable from other runtime errors.
class StoreError(RuntimeError):
    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class Store(Protocol):
    async def select(
        self,
        table: str,
        *,
        order_by: str | None = None,
        ascending: bool = True,
        filters: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]: ...

    async def insert(self, table: str, row: Mapping[str, Any]) -> dict[str, Any]: ...

    async def delete(self, table: str, *, filters: Mapping[str, Any]) -> int: ...


def _eq(value: Any) -> str:
    if isinstance(value, bool):
        return f"eq.{str(value).lower()}"
    return f"eq.{value}"


def _filter_params(filters: Mapping[str, Any] | None) -> dict[str, str]:
    return {column: _eq(value) for column, value in (filters or {}).items()}


def _error_from_response(resp: httpx.Response) -> StoreError:
    message = ""
    code = None
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = str(body.get("message") or "").strip()
        code = body.get("code")
    if not message:
        # Avoid dumping huge bodies; include a small snippet.
        message = f"Store request failed: {resp.status_code} {resp.text[:500]}".strip()
    return StoreError(message, code=str(code) if code is not None else None)


class PostgrestStore:
    """
    `Store` implementation for a Supabase project.

    Owns one `httpx.AsyncClient`; call `aclose()` on shutdown.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout_s: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        base_url = (base_url or "").strip().rstrip("/")
        if not base_url:
            raise StoreError("Store URL is empty.")
        api_key = (api_key or "").strip()
        if not api_key:
            raise StoreError("Store key is empty.")

        self._client = httpx.AsyncClient(
            base_url=base_url + REST_PATH,
            timeout=timeout_s,
            transport=transport,
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        table: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        try:
            resp = await self._client.request(
                method,
                f"/{table}",
                params=params,
                json=json,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise StoreError(str(exc) or exc.__class__.__name__) from exc

        if not resp.is_success:
            raise _error_from_response(resp)

        if not resp.content:
            return []
        try:
            data = resp.json()
        except ValueError as exc:
            raise StoreError(f"Store returned a non-JSON body for {table}.") from exc
        if not isinstance(data, list):
            raise StoreError(f"Store returned an unexpected payload for {table}.")
        return data

    async def select(
        self,
        table: str,
        *,
        order_by: str | None = None,
        ascending: bool = True,
        filters: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        params = {"select": "*", **_filter_params(filters)}
        if order_by:
            params["order"] = f"{order_by}.{'asc' if ascending else 'desc'}"
        return await self._request("GET", table, params=params)

    async def insert(self, table: str, row: Mapping[str, Any]) -> dict[str, Any]:
        rows = await self._request(
            "POST",
            table,
            json=[dict(row)],
            headers={"Prefer": "return=representation"},
        )
        if len(rows) != 1:
            raise StoreError(
                f"Insert into {table} returned {len(rows)} rows, expected exactly one."
            )
        return rows[0]

    async def delete(self, table: str, *, filters: Mapping[str, Any]) -> int:
        if not filters:
            # PostgREST refuses unfiltered deletes too; fail before the round trip.
            raise StoreError(f"Refusing to delete from {table} without a filter.")
        rows = await self._request(
            "DELETE",
            table,
            params=_filter_params(filters),
            headers={"Prefer": "return=representation"},
        )
        return len(rows)
