"""
Base schema for records that cross the API/store boundary.

Fields are declared with their store (snake_case) names. The API (camelCase)
names are generated aliases, so one model is the whole mapping:

- `Model.model_validate(row)` reads a store row,
- FastAPI serializes responses by alias (camelCase),
- `to_row(model)` writes store columns back out.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from .store import StoreError

RecordT = TypeVar("RecordT", bound=BaseModel)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def from_row(model: type[RecordT], row: dict[str, Any], *, table: str) -> RecordT:
    """
    Map one store row to its record type.

    A row that doesn't fit the record is reported as a store failure.
    """
    try:
        return model.model_validate(row)
    except ValidationError as exc:
        raise StoreError(f"Malformed {table} row from store: {exc.error_count()} invalid field(s).") from exc


def to_row(payload: BaseModel) -> dict[str, Any]:
    """
    Store columns for a validated request body (JSON-safe values).
    """
    return payload.model_dump(mode="json", by_alias=False)
