"""Language-model oracle for food selection and serving estimation."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from meal_analyzer.domain.nutrition import SearchCandidate
from meal_analyzer.domain.oracle import FoodSelection, ParsedMeal, ServingEstimate

SELECTION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "foodItem": {
            "type": "integer",
            "description": "1-based number of the item that best matches the query",
        }
    },
    "required": ["foodItem"],
    "additionalProperties": False,
}

SERVING_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "gramsAmount": {
            "type": "number",
            "description": "Weight of the serving in grams",
        }
    },
    "required": ["gramsAmount"],
    "additionalProperties": False,
}

MEAL_ITEMS_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "items": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "foodName": {"type": "string"},
                    "serving": {"type": "string"},
                },
                "required": ["foodName", "serving"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["items"],
    "additionalProperties": False,
}

SELECTION_SYSTEM_PROMPT = (
    "Você é um assistente de nutrição que identifica alimentos em uma base de "
    "dados nutricional. Escolha o resultado que melhor corresponde à busca do "
    "usuário. Prefira alimentos genéricos (sem marca) quando o usuário não "
    "mencionar uma marca."
)

SERVING_SYSTEM_PROMPT = (
    "Você é um assistente de nutrição que converte porções de alimentos em "
    "gramas. Use as informações da página nutricional e porções típicas como "
    "referência: 1 colher de sopa ~15g, 1 colher de chá ~5g, 1 xícara ~240ml, "
    "1 porção geralmente 100-150g, pratos cheios 200-300g. Sempre responda "
    "com um número em gramas, mesmo que seja uma estimativa."
)

MEAL_SYSTEM_PROMPT = (
    "Extraia os alimentos e suas porções da descrição fornecida. Use nomes "
    "simples de alimentos em português do Brasil. Se a porção não for "
    "informada, estime com base no contexto."
)


class CompletionClient(Protocol):
    """Interface for schema-constrained text completion."""

    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        schema_name: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        """Return the JSON object produced for the prompts."""


@dataclass
class FoodOracle:
    """Prompts the completion client and validates its answers.

    Errors are raised to the caller; fallback policy lives with the
    pipeline steps that consult the oracle.
    """

    client: CompletionClient
    model: str

    async def select(self, query: str, candidates: Sequence[SearchCandidate]) -> int:
        """Return the 1-based index of the candidate matching the query."""
        listing = "\n".join(
            f"{position}. {_describe_candidate(candidate)}"
            for position, candidate in enumerate(candidates, start=1)
        )
        prompt = (
            f'O usuário está procurando informações nutricionais sobre: "{query}"\n\n'
            f"Resultados da busca:\n{listing}\n\n"
            f"Qual número de item (1-{len(candidates)}) melhor corresponde à busca?"
        )
        raw = await self.client.complete(
            model=self.model,
            system_prompt=SELECTION_SYSTEM_PROMPT,
            user_prompt=prompt,
            schema_name="food_selection",
            schema=SELECTION_SCHEMA,
        )
        return FoodSelection.model_validate(raw).food_item

    async def estimate_grams(
        self,
        food_name: str,
        user_serving: str,
        page_context: str,
        serving_options: Sequence[str],
    ) -> float:
        """Return the weight in grams of the described serving."""
        options = "\n".join(serving_options)
        prompt = (
            f"Alimento: {food_name}\n\n"
            f'Porção informada pelo usuário: "{user_serving}"\n\n'
            f"Informações da página nutricional:\n{page_context}\n\n"
            f"Porções disponíveis na página:\n{options}\n\n"
            f'Qual é o peso em gramas da porção "{user_serving}"?'
        )
        raw = await self.client.complete(
            model=self.model,
            system_prompt=SERVING_SYSTEM_PROMPT,
            user_prompt=prompt,
            schema_name="serving_size",
            schema=SERVING_SCHEMA,
        )
        return ServingEstimate.model_validate(raw).grams_amount

    async def parse_meal(self, description: str) -> ParsedMeal:
        """Split a free-text meal description into food items."""
        raw = await self.client.complete(
            model=self.model,
            system_prompt=MEAL_SYSTEM_PROMPT,
            user_prompt=description,
            schema_name="meal_items",
            schema=MEAL_ITEMS_SCHEMA,
        )
        return ParsedMeal.model_validate(raw)


def _describe_candidate(candidate: SearchCandidate) -> str:
    brand = f" ({candidate.brand})" if candidate.brand else ""
    return (
        f"{candidate.name}{brand} - {candidate.calories_per_100g:g} kcal, "
        f"{candidate.fat_per_100g:g}g gordura, "
        f"{candidate.carbs_per_100g:g}g carboidratos, "
        f"{candidate.protein_per_100g:g}g proteína"
    )
