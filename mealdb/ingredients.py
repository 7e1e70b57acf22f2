"""
Ingredient normalization for recipe detail payloads.

TheMealDB does not return ingredients as a list. Each meal carries twenty
numbered slot pairs (strIngredient1/strMeasure1 .. strIngredient20/strMeasure20)
where unused slots are null, "" or " ". The helpers here turn those slots into
an ordered list of Ingredient records. They are pure: no I/O, no network calls.
"""

from typing import Any, List, Mapping

from mealdb.models import Ingredient

INGREDIENT_SLOTS = 20

INGREDIENT_KEY = "strIngredient{index}"
MEASURE_KEY = "strMeasure{index}"


def is_filled(value: Any) -> bool:
    """
    Check whether a slot value counts as present.

    Args:
        value: Raw value from the payload (may be None or a non-string)

    Returns:
        True if value is a non-empty string other than a single space
    """
    return isinstance(value, str) and value != "" and value != " "


def extract_ingredients(raw: Mapping[str, Any]) -> List[Ingredient]:
    """
    Build the ordered ingredient list from a raw detail payload.

    Slots 1..20 are read in order. A slot is kept only if both its ingredient
    and its measure are filled (see is_filled); values are kept verbatim.

    Args:
        raw: Decoded JSON object for one meal

    Returns:
        List of Ingredient in ascending slot order

    Examples:
        >>> extract_ingredients({"strIngredient1": "Sugar", "strMeasure1": "200g"})
        [Ingredient(name='Sugar', measure='200g')]
    """
    ingredients: List[Ingredient] = []
    for index in range(1, INGREDIENT_SLOTS + 1):
        name = raw.get(INGREDIENT_KEY.format(index=index))
        measure = raw.get(MEASURE_KEY.format(index=index))
        if is_filled(name) and is_filled(measure):
            ingredients.append(Ingredient(name=name, measure=measure))
    return ingredients
