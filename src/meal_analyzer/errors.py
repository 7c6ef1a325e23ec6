"""Errors raised by the meal analysis pipeline."""


class MealAnalyzerError(Exception):
    """Base error for the meal analyzer."""


class NotFoundError(MealAnalyzerError):
    """The food source returned no candidates for a query."""

    def __init__(self, query: str) -> None:
        super().__init__(f'No food items found for "{query}"')
        self.query = query


class FetchError(MealAnalyzerError):
    """A request to the food source failed or returned a non-2xx status."""

    def __init__(
        self, url: str, status_code: int | None = None, reason: str | None = None
    ) -> None:
        detail = f"status={status_code}" if status_code is not None else "transport"
        message = f"Failed to fetch {url} ({detail})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.reason = reason


class MealParseError(MealAnalyzerError):
    """A meal description could not be split into food items."""
