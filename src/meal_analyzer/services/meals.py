"""Meal-level aggregation of resolved foods."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from meal_analyzer.domain.meals import AggregateResult, MealItem, ResolvedFoodItem
from meal_analyzer.domain.nutrition import NutrientVector
from meal_analyzer.domain.oracle import ParsedMeal
from meal_analyzer.errors import MealParseError
from meal_analyzer.services.numbers import round_2
from meal_analyzer.services.nutrition import NutritionService
from meal_analyzer.services.scaling import add_nutrients, round_nutrients
from meal_analyzer.services.servings import DEFAULT_SERVING_GRAMS

_logger = logging.getLogger(__name__)


class MealParser(Protocol):
    """Capability that splits a meal description into food items."""

    async def parse_meal(self, description: str) -> ParsedMeal:
        """Return the foods mentioned in the description."""


@dataclass
class MealAnalysisService:
    """Aggregates nutrition across the items of a meal."""

    nutrition_service: NutritionService
    meal_parser: MealParser

    async def aggregate(self, items: Sequence[MealItem]) -> AggregateResult:
        """Resolve every item in order and sum their nutrients.

        Items are resolved one at a time; the first failure aborts the whole
        call. Totals are rounded once, after summing.
        """
        if not items:
            return AggregateResult.empty()

        totals = NutrientVector.zero()
        total_grams = 0.0
        resolved: list[ResolvedFoodItem] = []
        for item in items:
            result = await self.nutrition_service.lookup_food(
                item.food_name, item.serving
            )
            grams = (
                result.serving.grams_amount
                if result.serving is not None
                else DEFAULT_SERVING_GRAMS
            )
            total_grams += grams
            totals = add_nutrients(totals, result.facts.nutrients)
            resolved.append(
                ResolvedFoodItem(
                    food_name=item.food_name,
                    serving=item.serving,
                    selected_food=result.selected_food,
                    source_url=result.source_url,
                    grams_amount=grams,
                    nutrients=result.facts.nutrients,
                )
            )

        return AggregateResult(
            item_count=len(items),
            total_grams=round_2(total_grams),
            totals=round_nutrients(totals),
            items=resolved,
        )

    async def analyze_description(self, description: str) -> AggregateResult:
        """Split a free-text meal description into items and aggregate them."""
        try:
            parsed = await self.meal_parser.parse_meal(description)
        except Exception as exc:
            raise MealParseError(
                f"Could not identify foods in meal description: {exc}"
            ) from exc
        items = [
            MealItem(food_name=entry.food_name, serving=entry.serving or None)
            for entry in parsed.items
        ]
        _logger.info("Parsed meal description into %s items", len(items))
        return await self.aggregate(items)
