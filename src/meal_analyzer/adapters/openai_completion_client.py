"""OpenAI Responses API client for structured completions."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from meal_analyzer.services.oracle import CompletionClient


@dataclass
class OpenAICompletionClient(CompletionClient):
    """Completion client backed by OpenAI Responses API."""

    client: AsyncOpenAI
    temperature: float = 0

    @classmethod
    def create(cls, api_key: str) -> "OpenAICompletionClient":
        """Create an OpenAI completion client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        schema_name: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        response = await self.client.responses.create(
            model=model,
            instructions=system_prompt,
            input=[{"role": "user", "content": user_prompt}],
            temperature=self.temperature,
            text={
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "strict": True,
                    "schema": schema,
                }
            },
            store=False,
        )
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(output_text)

    async def close(self) -> None:
        """Close the underlying OpenAI client."""
        await self.client.close()
