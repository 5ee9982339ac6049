"""
Car schemas (API shape <-> `cars` table).
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from core.schemas import CamelModel


class CarCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    owner_id: int
    # Accepts "12.50" as well as 12.5; stored as numeric text.
    roundtrip_cost: Decimal


class Car(CamelModel):
    id: int
    name: str | None = None
    owner_id: int | None = None
    roundtrip_cost: float | None = None
