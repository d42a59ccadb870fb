"""
Recipe contracts.

The lookup endpoint returns a flat record with numbered ingredient and
measurement slots (strIngredient1..20 / strMeasure1..20). RawRecipeMeal keeps
those slots as extra fields so the slot count is not baked into the model;
Recipe is the normalized value handed to callers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

INGREDIENT_PREFIX = "strIngredient"
MEASURE_PREFIX = "strMeasure"

_SLOT_KEY = re.compile(rf"^(?:{INGREDIENT_PREFIX}|{MEASURE_PREFIX})\d+$")


# ---------------------------------------------------------------------------
# Wire models
# ---------------------------------------------------------------------------

class RawRecipeMeal(BaseModel):
    model_config = ConfigDict(extra="allow")

    strMeal: str
    strInstructions: str
    strMealThumb: str

    @model_validator(mode="after")
    def _check_slots(self) -> "RawRecipeMeal":
        for key, value in (self.model_extra or {}).items():
            if _SLOT_KEY.match(key) and value is not None and not isinstance(value, str):
                raise ValueError(f"{key} must be a string or null, got {type(value).__name__}")
        return self

    def slot(self, prefix: str, number: int) -> Optional[str]:
        """Return the raw value of slot ``<prefix><number>``, or None when absent."""
        return (self.model_extra or {}).get(f"{prefix}{number}")


class RawRecipePayload(BaseModel):
    meals: Optional[List[RawRecipeMeal]] = None


# ---------------------------------------------------------------------------
# Domain model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Recipe:
    name: str
    instructions: str
    ingredients: Tuple[str, ...]
    measurements: Tuple[str, ...]
    thumbnail_ref: str

    def __post_init__(self) -> None:
        if len(self.ingredients) != len(self.measurements):
            raise ValueError(
                f"ingredients ({len(self.ingredients)}) and measurements "
                f"({len(self.measurements)}) must have the same length"
            )

    def pairs(self) -> Iterator[Tuple[str, str]]:
        """Yield (ingredient, measurement) in slot order."""
        return zip(self.ingredients, self.measurements)
