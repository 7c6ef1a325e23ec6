"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from meal_analyzer.api.models import (
    AggregateResponse,
    CandidateModel,
    FoodLookupRequest,
    FoodLookupResponse,
    MealAggregateRequest,
    MealAnalyzeRequest,
)
from meal_analyzer.app_logging import configure_logging
from meal_analyzer.containers import AppContainer
from meal_analyzer.domain.meals import MealItem
from meal_analyzer.errors import FetchError, MealParseError, NotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods/search")
    async def search_foods(q: str, request: Request) -> list[CandidateModel]:
        """List the search candidates for a food name."""
        state_container: AppContainer = request.app.state.container
        try:
            candidates = await state_container.nutrition_service.search_foods(q)
        except FetchError as exc:
            logger.warning("Food search failed: %s", exc)
            raise _http_error(exc) from exc
        return [CandidateModel.from_candidate(candidate) for candidate in candidates]

    @app.post("/foods/lookup")
    async def lookup_food(
        body: FoodLookupRequest, request: Request
    ) -> FoodLookupResponse:
        """Resolve one food, optionally scaled to a serving."""
        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.nutrition_service.lookup_food(
                body.food_name, body.serving
            )
        except (NotFoundError, FetchError) as exc:
            logger.warning("Food lookup failed: %s", exc)
            raise _http_error(exc) from exc
        return FoodLookupResponse.from_result(result)

    @app.post("/meals/aggregate")
    async def aggregate_meal(
        body: MealAggregateRequest, request: Request
    ) -> AggregateResponse:
        """Aggregate nutrition over a list of items."""
        state_container: AppContainer = request.app.state.container
        items = [
            MealItem(food_name=item.food_name, serving=item.serving)
            for item in body.items
        ]
        try:
            result = await state_container.meal_analysis_service.aggregate(items)
        except (NotFoundError, FetchError) as exc:
            logger.warning("Meal aggregation failed: %s", exc)
            raise _http_error(exc) from exc
        return AggregateResponse.from_result(result)

    @app.post("/meals/analyze")
    async def analyze_meal(
        body: MealAnalyzeRequest, request: Request
    ) -> AggregateResponse:
        """Analyze a free-text meal description."""
        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.meal_analysis_service.analyze_description(
                body.description
            )
        except (NotFoundError, FetchError, MealParseError) as exc:
            logger.warning("Meal analysis failed: %s", exc)
            raise _http_error(exc) from exc
        return AggregateResponse.from_result(result)

    return app


def _http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, MealParseError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        )
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
