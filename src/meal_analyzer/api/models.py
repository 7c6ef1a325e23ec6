"""Request and response models for the HTTP API."""

from pydantic import BaseModel, Field

from meal_analyzer.domain.meals import (
    AggregateResult,
    FoodLookupResult,
    ResolvedFoodItem,
    ServingResolution,
)
from meal_analyzer.domain.nutrition import NutrientVector, SearchCandidate


class FoodLookupRequest(BaseModel):
    """Body for a single food lookup."""

    food_name: str = Field(min_length=1)
    serving: str | None = None


class MealItemPayload(BaseModel):
    """One item of a meal."""

    food_name: str = Field(min_length=1)
    serving: str | None = None


class MealAggregateRequest(BaseModel):
    """Body for aggregating a list of items."""

    items: list[MealItemPayload]


class MealAnalyzeRequest(BaseModel):
    """Body for analyzing a free-text meal description."""

    description: str = Field(min_length=1)


class EnergyModel(BaseModel):
    kj: float
    kcal: float


class FatModel(BaseModel):
    total: float
    saturated: float
    trans: float
    monounsaturated: float
    polyunsaturated: float


class NutrientsModel(BaseModel):
    """Serialized nutrient vector."""

    energy: EnergyModel
    carbohydrates: float
    sugar: float
    protein: float
    fat: FatModel
    cholesterol: float
    fiber: float
    sodium: float
    potassium: float

    @classmethod
    def from_vector(cls, vector: NutrientVector) -> "NutrientsModel":
        return cls.model_validate(vector.as_dict())


class CandidateModel(BaseModel):
    name: str
    brand: str | None
    url: str
    calories_per_100g: float
    fat_per_100g: float
    carbs_per_100g: float
    protein_per_100g: float

    @classmethod
    def from_candidate(cls, candidate: SearchCandidate) -> "CandidateModel":
        return cls(
            name=candidate.name,
            brand=candidate.brand,
            url=candidate.url,
            calories_per_100g=candidate.calories_per_100g,
            fat_per_100g=candidate.fat_per_100g,
            carbs_per_100g=candidate.carbs_per_100g,
            protein_per_100g=candidate.protein_per_100g,
        )


class ServingModel(BaseModel):
    user_serving: str
    grams_amount: float
    multiplier: float

    @classmethod
    def from_resolution(cls, resolution: ServingResolution) -> "ServingModel":
        return cls(
            user_serving=resolution.user_serving,
            grams_amount=resolution.grams_amount,
            multiplier=resolution.multiplier,
        )


class FoodLookupResponse(BaseModel):
    """Nutrition facts for one food."""

    search_query: str
    selected_food: str
    source_url: str
    name: str
    serving_size: str
    nutrients: NutrientsModel
    serving: ServingModel | None

    @classmethod
    def from_result(cls, result: FoodLookupResult) -> "FoodLookupResponse":
        return cls(
            search_query=result.search_query,
            selected_food=result.selected_food,
            source_url=result.source_url,
            name=result.facts.name,
            serving_size=result.facts.serving_size,
            nutrients=NutrientsModel.from_vector(result.facts.nutrients),
            serving=(
                ServingModel.from_resolution(result.serving)
                if result.serving
                else None
            ),
        )


class ResolvedItemModel(BaseModel):
    food_name: str
    serving: str | None
    selected_food: str
    source_url: str
    grams_amount: float
    nutrients: NutrientsModel

    @classmethod
    def from_item(cls, item: ResolvedFoodItem) -> "ResolvedItemModel":
        return cls(
            food_name=item.food_name,
            serving=item.serving,
            selected_food=item.selected_food,
            source_url=item.source_url,
            grams_amount=item.grams_amount,
            nutrients=NutrientsModel.from_vector(item.nutrients),
        )


class AggregateResponse(BaseModel):
    """Totals for a meal."""

    item_count: int
    total_grams: float
    totals: NutrientsModel
    items: list[ResolvedItemModel]

    @classmethod
    def from_result(cls, result: AggregateResult) -> "AggregateResponse":
        return cls(
            item_count=result.item_count,
            total_grams=result.total_grams,
            totals=NutrientsModel.from_vector(result.totals),
            items=[ResolvedItemModel.from_item(item) for item in result.items],
        )
