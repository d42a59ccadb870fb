"""Shared fixtures and payload builders for catalog and recipe tests."""

import json

import pytest

from dessert_catalog.integrations.clients.mocks import LocalCatalogTransport
from dessert_catalog.utils.config_loader import MealDBApiConfig

CATALOG_URL = "https://www.themealdb.com/api/json/v1/1/filter.php?c=Dessert"


def lookup_url(recipe_id: str) -> str:
    return f"https://www.themealdb.com/api/json/v1/1/lookup.php?i={recipe_id}"


def make_meal(ingredients=None, measures=None, slot_count=20, **fields):
    """Build a raw lookup record; ``ingredients``/``measures`` map slot number -> value."""
    meal = {
        "idMeal": "52893",
        "strMeal": "Apple & Blackberry Crumble",
        "strInstructions": "Heat oven to 190C.",
        "strMealThumb": "https://www.themealdb.com/images/media/meals/xvsurr1511719182.jpg",
    }
    for n in range(1, slot_count + 1):
        meal[f"strIngredient{n}"] = (ingredients or {}).get(n)
        meal[f"strMeasure{n}"] = (measures or {}).get(n)
    meal.update(fields)
    return meal


def recipe_body(*meals) -> bytes:
    return json.dumps({"meals": list(meals)}).encode("utf-8")


@pytest.fixture
def api():
    return MealDBApiConfig()


@pytest.fixture
def transport():
    return LocalCatalogTransport()
