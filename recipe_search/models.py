"""
Recipe models for the recipe search client.

The Edamam response is validated against ApiResponse first (hits -> recipe),
then each recipe is projected into a RecipeRecord, the display-ready record the
Streamlit front end renders. The projection is a direct field rename: no value
is transformed, and calories stay raw (formatting happens at display time).

Field mapping (API -> RecipeRecord):
- label -> title
- image -> image_url
- source -> source_name
- ingredientLines -> ingredient_lines
- url -> detail_url
- calories -> calories
"""

from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ApiRecipe(BaseModel):
    """Recipe object as returned inside each Edamam hit. Extra fields are ignored."""
    label: str = Field(..., description="Recipe title")
    image: str = Field(..., description="URL to recipe image")
    source: str = Field(..., description="Publisher name")
    ingredientLines: List[str] = Field(..., description="Human-readable ingredient lines")
    url: str = Field(..., description="URL to the full recipe on the publisher site")
    calories: float = Field(..., description="Total calories for the recipe")

    model_config = ConfigDict(extra="ignore")


class Hit(BaseModel):
    """Single search hit wrapping one recipe."""
    recipe: ApiRecipe

    model_config = ConfigDict(extra="ignore")


class ApiResponse(BaseModel):
    """Top-level Edamam search response. Only hits is used."""
    hits: List[Hit] = Field(..., description="Search hits in response order")

    model_config = ConfigDict(extra="ignore")


class RecipeRecord(BaseModel):
    """
    Display record for one recipe card.

    Immutable once created; a result set is a tuple of these in API order.
    """
    title: str = Field(..., description="Recipe title")
    image_url: str = Field(..., description="URL to recipe image")
    source_name: str = Field(..., description="Publisher name")
    ingredient_lines: Tuple[str, ...] = Field(default_factory=tuple, description="Ingredient lines in original order")
    detail_url: str = Field(..., description="Outbound link to the full recipe")
    calories: float = Field(..., description="Raw calorie count (not rounded)")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "title": "Banana Oat Pancakes",
                "image_url": "https://example.com/pancakes.jpg",
                "source_name": "Food52",
                "ingredient_lines": ["1 banana", "1 cup oats", "2 eggs"],
                "detail_url": "https://food52.com/recipes/banana-oat-pancakes",
                "calories": 612.4821,
            }
        },
    )

    @classmethod
    def from_api(cls, recipe: ApiRecipe) -> "RecipeRecord":
        """Project an API recipe into a RecipeRecord."""
        return cls(
            title=recipe.label,
            image_url=recipe.image,
            source_name=recipe.source,
            ingredient_lines=tuple(recipe.ingredientLines),
            detail_url=recipe.url,
            calories=recipe.calories,
        )


def parse_search_response(payload: Dict[str, Any]) -> List[RecipeRecord]:
    """
    Validate an Edamam response body and map every hit to a RecipeRecord.

    Args:
        payload: Decoded JSON body

    Returns:
        One RecipeRecord per hit, in response order (empty list for no hits)

    Raises:
        pydantic.ValidationError: If the body does not have the expected shape.
    """
    response = ApiResponse.model_validate(payload)
    return [RecipeRecord.from_api(hit.recipe) for hit in response.hits]
