"""HTTP client for the nutrition database website."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from meal_analyzer.errors import FetchError

_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"


class FoodSourceClient(Protocol):
    """Interface for fetching search and detail pages."""

    async def fetch_search_page(self, query: str) -> str:
        """Return the HTML of the search results page for a query."""

    async def fetch_page(self, url: str) -> str:
        """Return the HTML of a food detail page."""


@dataclass
class HttpxFoodSourceClient(FoodSourceClient):
    """HTTPX-backed food source client."""

    base_url: str
    search_path: str
    user_agent: str
    accept_language: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        *,
        base_url: str,
        search_path: str,
        user_agent: str,
        accept_language: str,
        timeout_seconds: float = 15,
    ) -> "HttpxFoodSourceClient":
        """Create a food source client with a managed httpx session."""
        return cls(
            base_url=base_url,
            search_path=search_path,
            user_agent=user_agent,
            accept_language=accept_language,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch_search_page(self, query: str) -> str:
        """Fetch the search results page for a query."""
        url = f"{self.base_url.rstrip('/')}{self.search_path}"
        return await self._get(url, params={"q": query})

    async def fetch_page(self, url: str) -> str:
        """Fetch a food detail page."""
        return await self._get(url)

    async def _get(self, url: str, params: dict[str, str] | None = None) -> str:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": _ACCEPT,
            "Accept-Language": self.accept_language,
        }
        try:
            response = await self.http_client.get(
                url,
                params=params,
                headers=headers,
                timeout=self.timeout_seconds,
                follow_redirects=True,
            )
        except httpx.HTTPError as exc:
            raise FetchError(url, reason=str(exc)) from exc
        if not response.is_success:
            raise FetchError(
                url, status_code=response.status_code, reason=response.reason_phrase
            )
        return response.text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
