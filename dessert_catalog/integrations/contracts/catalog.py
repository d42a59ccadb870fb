"""
Catalog contracts.

Wire shape of the category filter endpoint and the DessertSummary value the
rest of the package works with.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# Wire models
# ---------------------------------------------------------------------------

class RawCatalogEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    idMeal: str
    strMeal: str


class RawCatalogPayload(BaseModel):
    meals: List[RawCatalogEntry]


# ---------------------------------------------------------------------------
# Domain model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DessertSummary:
    id: str
    name: str

    @classmethod
    def from_entry(cls, entry: RawCatalogEntry) -> "DessertSummary":
        return cls(id=entry.idMeal, name=entry.strMeal)
