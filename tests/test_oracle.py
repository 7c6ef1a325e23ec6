"""Tests for the food oracle prompts and validation."""

import asyncio
from dataclasses import dataclass, field

import pytest
from pydantic import ValidationError

from meal_analyzer.domain.nutrition import SearchCandidate
from meal_analyzer.services.disambiguation import select_best_match
from meal_analyzer.services.oracle import (
    SELECTION_SCHEMA,
    SERVING_SCHEMA,
    CompletionClient,
    FoodOracle,
)
from meal_analyzer.services.servings import resolve_serving_grams


@dataclass
class RecordingCompletionClient(CompletionClient):
    payload: dict[str, object]
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        schema_name: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        self.calls.append(
            {
                "model": model,
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "schema_name": schema_name,
                "schema": schema,
            }
        )
        return self.payload


CANDIDATES = [
    SearchCandidate(
        name="Carne Moída Refogada",
        url="https://food.test/1",
        calories_per_100g=212,
        fat_per_100g=10.85,
        carbs_per_100g=0,
        protein_per_100g=26.77,
    ),
    SearchCandidate(
        name="Carne Moída Patinho",
        url="https://food.test/2",
        brand="Friboi",
        calories_per_100g=133,
        fat_per_100g=5.4,
        carbs_per_100g=0,
        protein_per_100g=21,
    ),
]


def test_select_lists_candidates_with_macros() -> None:
    client = RecordingCompletionClient(payload={"foodItem": 2})
    oracle = FoodOracle(client=client, model="gpt-4o-mini")

    index = asyncio.run(oracle.select("carne moída", CANDIDATES))

    assert index == 2
    call = client.calls[0]
    assert call["schema"] is SELECTION_SCHEMA
    assert call["schema_name"] == "food_selection"
    prompt = str(call["user_prompt"])
    assert "1. Carne Moída Refogada - 212 kcal, 10.85g gordura" in prompt
    assert "2. Carne Moída Patinho (Friboi) - 133 kcal" in prompt
    assert "(1-2)" in prompt


def test_select_rejects_malformed_payload() -> None:
    oracle = FoodOracle(
        client=RecordingCompletionClient(payload={"item": 1}), model="gpt-4o-mini"
    )

    with pytest.raises(ValidationError):
        asyncio.run(oracle.select("carne", CANDIDATES))


def test_malformed_selection_falls_back_through_pipeline() -> None:
    oracle = FoodOracle(
        client=RecordingCompletionClient(payload={"foodItem": "segundo"}),
        model="gpt-4o-mini",
    )

    selected = asyncio.run(select_best_match("carne", CANDIDATES, oracle))

    assert selected is CANDIDATES[0]


def test_estimate_grams_sends_serving_options(food_page_html: str) -> None:
    client = RecordingCompletionClient(payload={"gramsAmount": 30})
    oracle = FoodOracle(client=client, model="gpt-4o-mini")

    grams = asyncio.run(
        resolve_serving_grams("carne moída", "2 colheres de sopa", food_page_html, oracle)
    )

    assert grams == 30
    call = client.calls[0]
    assert call["schema"] is SERVING_SCHEMA
    assert '"2 colheres de sopa"' in str(call["user_prompt"])
    assert "1 xícara (225 g) - 351 kcal" in str(call["user_prompt"])


def test_non_numeric_grams_fall_back_to_default(food_page_html: str) -> None:
    oracle = FoodOracle(
        client=RecordingCompletionClient(payload={"gramsAmount": "muito"}),
        model="gpt-4o-mini",
    )

    grams = asyncio.run(
        resolve_serving_grams("carne moída", "um pouco", food_page_html, oracle)
    )

    assert grams == 100


def test_parse_meal_validates_items() -> None:
    client = RecordingCompletionClient(
        payload={
            "items": [
                {"foodName": "arroz branco", "serving": "2 colheres de sopa"},
                {"foodName": "feijão", "serving": "1 concha"},
            ]
        }
    )
    oracle = FoodOracle(client=client, model="gpt-4o-mini")

    parsed = asyncio.run(oracle.parse_meal("arroz com feijão"))

    assert [item.food_name for item in parsed.items] == ["arroz branco", "feijão"]
    assert client.calls[0]["user_prompt"] == "arroz com feijão"
