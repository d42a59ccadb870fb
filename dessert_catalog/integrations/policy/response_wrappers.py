from __future__ import annotations

from typing import List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from dessert_catalog.integrations.contracts.catalog import DessertSummary, RawCatalogPayload
from dessert_catalog.integrations.contracts.errors import DecodeError, NotFound
from dessert_catalog.integrations.contracts.recipe import (
    INGREDIENT_PREFIX,
    MEASURE_PREFIX,
    RawRecipeMeal,
    RawRecipePayload,
    Recipe,
)

DEFAULT_SLOT_COUNT = 20

_PAYLOAD_PREVIEW = 500

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_catalog_payload(raw: bytes) -> List[DessertSummary]:
    """Decode a category filter response, keeping server order."""
    payload = _parse(RawCatalogPayload, raw)
    return [DessertSummary.from_entry(entry) for entry in payload.meals]


def decode_recipe_payload(raw: bytes, recipe_id: str, *, slot_count: int = DEFAULT_SLOT_COUNT) -> Recipe:
    """
    Decode a lookup response into a Recipe.

    An absent, null or empty ``meals`` list means the id is unknown and raises
    NotFound; a body that does not fit the schema raises DecodeError. Only the
    first meal is used.
    """
    payload = _parse(RawRecipePayload, raw)
    if not payload.meals:
        raise NotFound(recipe_id)
    return normalize_recipe(payload.meals[0], slot_count=slot_count)


def normalize_recipe(meal: RawRecipeMeal, *, slot_count: int = DEFAULT_SLOT_COUNT) -> Recipe:
    """
    Flatten numbered slots into parallel ingredient/measurement sequences.

    A slot is kept only when its ingredient is non-blank; the measurement at
    the same slot goes along with it, or "" when missing. Kept values are
    stored as sent.
    """
    ingredients: List[str] = []
    measurements: List[str] = []
    for number in range(1, slot_count + 1):
        ingredient = meal.slot(INGREDIENT_PREFIX, number)
        if not ingredient or not ingredient.strip():
            continue
        ingredients.append(ingredient)
        measurements.append(meal.slot(MEASURE_PREFIX, number) or "")

    return Recipe(
        name=meal.strMeal,
        instructions=meal.strInstructions,
        ingredients=tuple(ingredients),
        measurements=tuple(measurements),
        thumbnail_ref=meal.strMealThumb,
    )


def _parse(model_type: Type[ModelT], raw: bytes) -> ModelT:
    try:
        return model_type.model_validate_json(raw)
    except ValidationError as exc:
        preview = raw[:_PAYLOAD_PREVIEW].decode("utf-8", errors="replace")
        raise DecodeError(f"{model_type.__name__} decode failed: {exc}", payload=preview) from exc
