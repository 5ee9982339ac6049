"""
Person schemas (API shape <-> `persons` table).
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from core.schemas import CamelModel


class PersonCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)


class Person(CamelModel):
    # Persons are surfaced as stored; extra columns pass through untouched.
    model_config = ConfigDict(extra="allow")

    id: int
    name: str | None = None
