"""Structured outputs expected from the language-model oracle."""

from pydantic import BaseModel, ConfigDict, Field


class FoodSelection(BaseModel):
    """1-based index of the best matching search candidate."""

    model_config = ConfigDict(populate_by_name=True)

    food_item: int = Field(alias="foodItem")


class ServingEstimate(BaseModel):
    """Weight in grams of a described serving."""

    model_config = ConfigDict(populate_by_name=True)

    grams_amount: float = Field(alias="gramsAmount")


class ParsedMealItem(BaseModel):
    """Single food mentioned in a meal description."""

    model_config = ConfigDict(populate_by_name=True)

    food_name: str = Field(alias="foodName", min_length=1)
    serving: str


class ParsedMeal(BaseModel):
    """Food items extracted from a meal description."""

    items: list[ParsedMealItem]
