"""Selection of validated image results."""

import logging
from collections.abc import Mapping, Sequence

from .models import CandidateResult, SelectionResult

logger = logging.getLogger(__name__)


def select_valid_images(
    candidates: Sequence[CandidateResult],
    verdicts: Mapping[str, bool],
    requested_count: int,
) -> SelectionResult:
    """Keep the candidates that passed validation, in provider order.

    Args:
        candidates: Provider results in ranking order
        verdicts: URL to validation verdict, as returned by ``validate_image_urls``
        requested_count: Maximum number of items to return

    Returns:
        SelectionResult with at most ``requested_count`` items. ``total_valid``
        counts every survivor before truncation and ``total_checked`` every
        candidate that received a verdict.
    """
    checked = [c for c in candidates if c.url and c.url in verdicts]
    survivors = [c for c in checked if verdicts[c.url] is True]

    result = SelectionResult(
        items=tuple(survivors[: max(requested_count, 0)]),
        total_valid=len(survivors),
        total_checked=len(checked),
    )
    logger.info(
        "Found %d valid images out of %d checked, returning %d",
        result.total_valid,
        result.total_checked,
        result.returned_count,
    )
    return result
