"""
Commute schemas (API shape <-> `commutes` table).

`selected_cars`, `selected_persons` and `drivers` hold ids. They are not
checked against the cars/persons tables here.
"""

from __future__ import annotations

import datetime
from decimal import Decimal

from pydantic import Field

from core.schemas import CamelModel


class CommuteCreate(CamelModel):
    date: datetime.date
    trip_type: str = Field(..., min_length=1, max_length=50)
    selected_cars: list[int]
    selected_persons: list[int]
    drivers: list[int]
    price_per_person: Decimal


class Commute(CamelModel):
    id: int
    date: datetime.date
    trip_type: str | None = None
    selected_cars: list[int] | None = None
    selected_persons: list[int] | None = None
    drivers: list[int] | None = None
    price_per_person: float | None = None
