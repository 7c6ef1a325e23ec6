"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from meal_analyzer.adapters.food_source_client import HttpxFoodSourceClient
from meal_analyzer.adapters.openai_completion_client import OpenAICompletionClient
from meal_analyzer.config import Settings
from meal_analyzer.services.meals import MealAnalysisService
from meal_analyzer.services.nutrition import NutritionService
from meal_analyzer.services.oracle import FoodOracle


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_service: NutritionService
    meal_analysis_service: MealAnalysisService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    food_source = HttpxFoodSourceClient.create(
        base_url=resolved_settings.food_source_base_url,
        search_path=resolved_settings.food_source_search_path,
        user_agent=resolved_settings.user_agent,
        accept_language=resolved_settings.accept_language,
        timeout_seconds=resolved_settings.http_timeout_seconds,
    )
    completion_client = OpenAICompletionClient.create(resolved_settings.openai_api_key)
    oracle = FoodOracle(client=completion_client, model=resolved_settings.openai_model)
    nutrition_service = NutritionService(
        food_source=food_source,
        selector=oracle,
        estimator=oracle,
        base_url=resolved_settings.food_source_base_url,
        debug=resolved_settings.debug,
    )
    meal_analysis_service = MealAnalysisService(
        nutrition_service=nutrition_service,
        meal_parser=oracle,
    )

    async def close_resources() -> None:
        await food_source.close()
        await completion_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_service=nutrition_service,
        meal_analysis_service=meal_analysis_service,
        close_resources=close_resources,
    )
