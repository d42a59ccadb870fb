import pytest

from dessert_catalog.integrations.contracts.recipe import RawRecipeMeal, RawRecipePayload, Recipe
from dessert_catalog.integrations.policy.response_wrappers import decode_recipe_payload, normalize_recipe

from tests.conftest import make_meal


def _normalize(**kwargs):
    return normalize_recipe(RawRecipeMeal.model_validate(make_meal(**kwargs)))


def test_ingredient_without_measure_pairs_with_empty_string():
    recipe = _normalize(ingredients={3: "Flour"}, measures={3: None})

    assert recipe.ingredients == ("Flour",)
    assert recipe.measurements == ("",)


def test_skipped_slots_keep_ingredient_measure_pairing():
    recipe = _normalize(
        ingredients={2: "Eggs", 7: "Sugar", 19: "Vanilla"},
        measures={1: "orphan measure", 2: "3", 7: "100g", 8: "also orphan", 19: "1 tsp"},
    )

    assert recipe.ingredients == ("Eggs", "Sugar", "Vanilla")
    assert recipe.measurements == ("3", "100g", "1 tsp")


def test_blank_ingredients_are_skipped_for_both_sequences():
    recipe = _normalize(
        ingredients={1: "Milk", 2: "", 3: "   ", 4: None, 5: "Honey"},
        measures={1: "1 pint", 2: "ignored", 3: "ignored", 4: "ignored", 5: "2 tbsp"},
    )

    assert recipe.ingredients == ("Milk", "Honey")
    assert recipe.measurements == ("1 pint", "2 tbsp")


def test_kept_values_are_stored_as_sent():
    recipe = _normalize(ingredients={1: " Butter ", 2: "  "}, measures={1: "60g ", 2: "ignored"})

    assert list(recipe.pairs()) == [(" Butter ", "60g ")]


def test_missing_slot_keys_are_treated_as_empty():
    meal = {
        "strMeal": "Sparse",
        "strInstructions": "Mix.",
        "strMealThumb": "t.jpg",
        "strIngredient4": "Cocoa",
    }

    recipe = normalize_recipe(RawRecipeMeal.model_validate(meal))

    assert recipe.ingredients == ("Cocoa",)
    assert recipe.measurements == ("",)


@pytest.mark.parametrize("populated", [set(), {1}, {20}, {1, 2, 5}, {3, 4, 10, 11, 17}, set(range(1, 21))])
def test_output_follows_ascending_slot_order(populated):
    recipe = _normalize(
        ingredients={n: f"ingredient-{n}" for n in populated},
        measures={n: f"measure-{n}" for n in range(1, 21)},
    )

    expected = sorted(populated)
    assert recipe.ingredients == tuple(f"ingredient-{n}" for n in expected)
    assert recipe.measurements == tuple(f"measure-{n}" for n in expected)


def test_thumbnail_is_copied_verbatim():
    recipe = _normalize(strMealThumb="not even a url")

    assert recipe.thumbnail_ref == "not even a url"


def test_encoded_payload_decodes_to_the_same_recipe_every_time():
    meal = RawRecipeMeal.model_validate(make_meal(
        ingredients={1: "Flour", 2: "Sugar", 5: "Butter"},
        measures={1: "200g", 5: "50g"},
    ))
    body = RawRecipePayload(meals=[meal]).model_dump_json().encode("utf-8")

    first = decode_recipe_payload(body, "52893")
    second = decode_recipe_payload(body, "52893")

    assert first == second
    assert first.ingredients == ("Flour", "Sugar", "Butter")
    assert first.measurements == ("200g", "", "50g")


def test_recipe_rejects_mismatched_sequences():
    with pytest.raises(ValueError):
        Recipe(name="x", instructions="y", ingredients=("a", "b"), measurements=("1",), thumbnail_ref="")


def test_unrelated_extra_fields_are_ignored():
    recipe = _normalize(ingredients={1: "Jam"}, strCategory="Dessert", strTags=None, strYoutube=12)

    assert recipe.ingredients == ("Jam",)
