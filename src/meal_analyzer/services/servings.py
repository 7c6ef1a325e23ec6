"""Resolution of free-text serving descriptions to grams."""

import logging
import math
from collections.abc import Sequence
from typing import Protocol

from meal_analyzer.domain.meals import ServingResolution
from meal_analyzer.services.detail_extraction import (
    extract_serving_context,
    extract_serving_options,
)

DEFAULT_SERVING_GRAMS = 100.0

_logger = logging.getLogger(__name__)


class GramsEstimator(Protocol):
    """Capability that estimates the weight of a described serving."""

    async def estimate_grams(
        self,
        food_name: str,
        user_serving: str,
        page_context: str,
        serving_options: Sequence[str],
    ) -> float:
        """Return the serving weight in grams."""


async def resolve_serving_grams(
    food_name: str,
    user_serving: str,
    detail_html: str,
    estimator: GramsEstimator,
) -> float:
    """Convert a serving description to grams, defaulting to 100."""
    try:
        grams = await estimator.estimate_grams(
            food_name,
            user_serving,
            extract_serving_context(detail_html),
            extract_serving_options(detail_html),
        )
    except Exception as exc:
        _logger.warning(
            "Serving estimation failed for %r (%r): %s", food_name, user_serving, exc
        )
        return DEFAULT_SERVING_GRAMS

    if not _is_valid_grams(grams):
        _logger.warning(
            "Serving estimation returned %r for %r (%r)", grams, food_name, user_serving
        )
        return DEFAULT_SERVING_GRAMS
    return float(grams)


async def resolve_serving(
    food_name: str,
    user_serving: str,
    detail_html: str,
    estimator: GramsEstimator,
) -> ServingResolution:
    """Resolve a serving description and its multiplier over 100 g."""
    grams = await resolve_serving_grams(food_name, user_serving, detail_html, estimator)
    return ServingResolution(
        user_serving=user_serving,
        grams_amount=grams,
        multiplier=grams / 100,
    )


def _is_valid_grams(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value) and value > 0
