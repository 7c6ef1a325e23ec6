"""Tests for container wiring."""

import asyncio

from meal_analyzer.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.nutrition_service.base_url == "https://food.test"
    assert container.meal_analysis_service.nutrition_service is container.nutrition_service
    assert container.nutrition_service.selector is container.nutrition_service.estimator
    asyncio.run(container.close_resources())
