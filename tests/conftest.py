"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from meal_analyzer.adapters.food_source_client import FoodSourceClient
from meal_analyzer.config import Settings
from meal_analyzer.domain.nutrition import SearchCandidate
from meal_analyzer.domain.oracle import ParsedMeal
from meal_analyzer.services.meals import MealAnalysisService
from meal_analyzer.services.nutrition import NutritionService

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    """Read an HTML fixture as text."""
    return (FIXTURES / name).read_text(encoding="utf-8")


@dataclass
class FakeFoodSourceClient(FoodSourceClient):
    """Food source returning canned pages and recording requests."""

    search_pages: dict[str, str] = field(default_factory=dict)
    pages: dict[str, str] = field(default_factory=dict)
    default_search_page: str = ""
    default_page: str = ""
    failures: dict[str, Exception] = field(default_factory=dict)
    searches: list[str] = field(default_factory=list)
    fetched: list[str] = field(default_factory=list)

    async def fetch_search_page(self, query: str) -> str:
        self.searches.append(query)
        if query in self.failures:
            raise self.failures[query]
        return self.search_pages.get(query, self.default_search_page)

    async def fetch_page(self, url: str) -> str:
        self.fetched.append(url)
        if url in self.failures:
            raise self.failures[url]
        return self.pages.get(url, self.default_page)


@dataclass
class ScriptedOracle:
    """Oracle returning scripted answers, or raising scripted errors."""

    selection: object = 1
    grams: object = 100.0
    meal: object = None
    select_calls: int = 0
    estimate_calls: list[tuple[str, str, str, list[str]]] = field(default_factory=list)

    async def select(self, query: str, candidates: Sequence[SearchCandidate]) -> int:
        self.select_calls += 1
        if isinstance(self.selection, Exception):
            raise self.selection
        return self.selection  # type: ignore[return-value]

    async def estimate_grams(
        self,
        food_name: str,
        user_serving: str,
        page_context: str,
        serving_options: Sequence[str],
    ) -> float:
        self.estimate_calls.append(
            (food_name, user_serving, page_context, list(serving_options))
        )
        if isinstance(self.grams, Exception):
            raise self.grams
        return self.grams  # type: ignore[return-value]

    async def parse_meal(self, description: str) -> ParsedMeal:
        if isinstance(self.meal, Exception):
            raise self.meal
        return ParsedMeal.model_validate(self.meal or {"items": []})


@pytest.fixture
def search_html() -> str:
    return load_fixture("search_results.html")


@pytest.fixture
def food_page_html() -> str:
    return load_fixture("food_page.html")


@pytest.fixture
def food_source(search_html: str, food_page_html: str) -> FakeFoodSourceClient:
    return FakeFoodSourceClient(
        default_search_page=search_html,
        default_page=food_page_html,
    )


@pytest.fixture
def oracle() -> ScriptedOracle:
    return ScriptedOracle()


@pytest.fixture
def nutrition_service(
    food_source: FakeFoodSourceClient, oracle: ScriptedOracle
) -> NutritionService:
    return NutritionService(food_source=food_source, selector=oracle, estimator=oracle)


@pytest.fixture
def meal_service(
    nutrition_service: NutritionService, oracle: ScriptedOracle
) -> MealAnalysisService:
    return MealAnalysisService(nutrition_service=nutrition_service, meal_parser=oracle)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="test-openai",
        food_source_base_url="https://food.test",
    )
