"""Nutrition lookups against the food source website."""

import logging
from dataclasses import dataclass

from meal_analyzer.adapters.food_source_client import FoodSourceClient
from meal_analyzer.domain.meals import FoodLookupResult, ServingResolution
from meal_analyzer.domain.nutrition import NutritionFacts, SearchCandidate
from meal_analyzer.errors import NotFoundError
from meal_analyzer.services.detail_extraction import extract_nutrients
from meal_analyzer.services.disambiguation import (
    CandidateSelector,
    select_best_match,
)
from meal_analyzer.services.scaling import scale_nutrients
from meal_analyzer.services.search_extraction import (
    FOOD_SOURCE_BASE_URL,
    extract_candidates,
)
from meal_analyzer.services.servings import GramsEstimator, resolve_serving

_logger = logging.getLogger(__name__)


@dataclass
class NutritionService:
    """Resolves food names to nutrition facts."""

    food_source: FoodSourceClient
    selector: CandidateSelector
    estimator: GramsEstimator
    base_url: str = FOOD_SOURCE_BASE_URL
    debug: bool = False

    async def search_foods(self, query: str) -> list[SearchCandidate]:
        """Return the search candidates for a query."""
        html = await self.food_source.fetch_search_page(query)
        candidates = extract_candidates(html, base_url=self.base_url)
        if self.debug:
            _logger.info("Food search: query=%s results=%s", query, len(candidates))
        return candidates

    async def lookup_food(
        self, food_name: str, serving: str | None = None
    ) -> FoodLookupResult:
        """Resolve a food name, optionally scaled to a serving description.

        Without a serving the facts stay per 100 g as declared on the page.
        """
        candidates = await self.search_foods(food_name)
        if not candidates:
            raise NotFoundError(food_name)

        best_match = await select_best_match(food_name, candidates, self.selector)
        detail_html = await self.food_source.fetch_page(best_match.url)
        facts = extract_nutrients(detail_html, best_match.name)

        resolution: ServingResolution | None = None
        if serving:
            resolution = await resolve_serving(
                food_name, serving, detail_html, self.estimator
            )
            facts = NutritionFacts(
                name=facts.name,
                serving_size=f"{resolution.grams_amount:g}g ({serving})",
                nutrients=scale_nutrients(facts.nutrients, resolution.multiplier),
            )

        if self.debug:
            _logger.info(
                "Food lookup: query=%s selected=%s grams=%s",
                food_name,
                best_match.name,
                resolution.grams_amount if resolution else None,
            )
        return FoodLookupResult(
            search_query=food_name,
            selected_food=best_match.name,
            source_url=best_match.url,
            facts=facts,
            serving=resolution,
        )
