"""Domain models for meal resolution and aggregation."""

from dataclasses import dataclass, field

from meal_analyzer.domain.nutrition import NutrientVector, NutritionFacts


@dataclass(frozen=True)
class MealItem:
    """A food requested by the caller, with an optional serving description."""

    food_name: str
    serving: str | None = None


@dataclass(frozen=True)
class ServingResolution:
    """A serving description resolved to grams."""

    user_serving: str
    grams_amount: float
    multiplier: float


@dataclass(frozen=True)
class FoodLookupResult:
    """Result of resolving a single food name."""

    search_query: str
    selected_food: str
    source_url: str
    facts: NutritionFacts
    serving: ServingResolution | None = None


@dataclass(frozen=True)
class ResolvedFoodItem:
    """A meal item resolved to a source entry and scaled nutrients."""

    food_name: str
    serving: str | None
    selected_food: str
    source_url: str
    grams_amount: float
    nutrients: NutrientVector


@dataclass(frozen=True)
class AggregateResult:
    """Totals across every item of a meal."""

    item_count: int
    total_grams: float
    totals: NutrientVector
    items: list[ResolvedFoodItem] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "AggregateResult":
        """Return the zeroed result for a meal with no items."""
        return cls(item_count=0, total_grams=0.0, totals=NutrientVector.zero())
