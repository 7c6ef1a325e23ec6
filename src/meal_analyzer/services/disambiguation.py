"""Selection of the best search candidate for a query."""

import logging
from collections.abc import Sequence
from typing import Protocol

from meal_analyzer.domain.nutrition import SearchCandidate
from meal_analyzer.errors import NotFoundError

_logger = logging.getLogger(__name__)


class CandidateSelector(Protocol):
    """Capability that picks a candidate by 1-based index."""

    async def select(self, query: str, candidates: Sequence[SearchCandidate]) -> int:
        """Return the 1-based index of the best candidate."""


async def select_best_match(
    query: str,
    candidates: Sequence[SearchCandidate],
    selector: CandidateSelector,
) -> SearchCandidate:
    """Pick the candidate that best matches the query.

    A single candidate is returned without consulting the selector. Any
    selector failure or out-of-range answer falls back to the first
    candidate.
    """
    if not candidates:
        raise NotFoundError(query)
    if len(candidates) == 1:
        return candidates[0]

    try:
        index = await selector.select(query, candidates)
    except Exception as exc:
        _logger.warning("Candidate selection failed for %r: %s", query, exc)
        return candidates[0]

    if isinstance(index, bool) or not isinstance(index, int):
        _logger.warning("Candidate selection returned %r for %r", index, query)
        return candidates[0]
    if index < 1 or index > len(candidates):
        _logger.warning(
            "Candidate selection index %s out of range 1-%s for %r",
            index,
            len(candidates),
            query,
        )
        return candidates[0]
    return candidates[index - 1]
