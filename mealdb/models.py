"""
Recipe models for the Dessert Browser.

This module defines the typed records produced by the recipe service and the
response envelopes used to decode TheMealDB payloads.

# NOTE: Field names are Pythonic (id, name, thumbnail_url); the wire names
    (idMeal, strMeal, strMealThumb, ...) are declared as aliases so the same
    models decode API payloads directly. populate_by_name lets tests and callers
    construct them with either spelling.

Current field expectations:
- filter.php?c=Dessert meals carry: idMeal, strMeal, strMealThumb
- lookup.php?i={id} meals carry: idMeal, strMeal, strInstructions, strMealThumb,
  strIngredient1..20, strMeasure1..20 and many other ignored keys
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ConfigDict


class Ingredient(BaseModel):
    """One ingredient line of a recipe, as (ingredient name, measure)."""
    name: str = Field(..., description="Ingredient name (e.g., 'Sugar')")
    measure: str = Field(..., description="Measure as given by the API (e.g., '200g')")

    model_config = ConfigDict(frozen=True)

    @property
    def label(self) -> str:
        """Display text, measure first (e.g., '200g Sugar')."""
        return f"{self.measure} {self.name}"


class RecipeSummary(BaseModel):
    """
    A recipe as listed by the dessert filter endpoint.

    Identity is the id. Instances are immutable.
    """
    id: str = Field(..., alias="idMeal", description="TheMealDB meal id")
    name: str = Field(..., alias="strMeal", description="Recipe name")
    thumbnail_url: str = Field(..., alias="strMealThumb", description="URL to the recipe thumbnail")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "idMeal": "52893",
                "strMeal": "Apple & Blackberry Crumble",
                "strMealThumb": "https://www.themealdb.com/images/media/meals/xvsurr1511719182.jpg",
            }
        },
    )


class RecipeDetail(BaseModel):
    """
    Full recipe record returned by the lookup endpoint.

    ingredients is derived from the numbered strIngredient/strMeasure slots
    by mealdb.ingredients.extract_ingredients and keeps slot order.
    """
    id: str = Field(..., alias="idMeal", description="TheMealDB meal id")
    name: str = Field(..., alias="strMeal", description="Recipe name")
    instructions: str = Field(..., alias="strInstructions", description="Free-text preparation instructions")
    thumbnail_url: str = Field(..., alias="strMealThumb", description="URL to the recipe image")
    ingredients: List[Ingredient] = Field(default_factory=list, description="Ingredient lines in slot order")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class MealListResponse(BaseModel):
    """Envelope of the dessert filter endpoint: {"meals": [...]}."""
    meals: List[RecipeSummary]


class MealLookupResponse(BaseModel):
    """
    Envelope of the lookup endpoint.

    meals stays a list of raw mappings so the numbered ingredient slots survive
    decoding. The API answers unknown ids with {"meals": null}.
    """
    meals: Optional[List[Dict[str, Any]]]
