"""Search orchestration for the text and image search tools.

The image path over-fetches from the provider to absorb validation attrition:

    Received -> Fetching -> NoResults
                         -> Validating -> AllInvalid
                                       -> PartiallyValid -> Formatted

There is a single provider call per request; if more candidates fail
validation than the margin covers, fewer results than requested are returned.
"""

import logging

from google_search_mcp.config import get_settings
from google_search_mcp.core.constants import (
    MAX_NUM_RESULTS,
    NO_IMAGE_RESULTS_MESSAGE,
    NO_VALID_IMAGES_MESSAGE,
)

from .formatting import format_image_search_results, format_search_results
from .image_validation import validate_image_urls
from .models import ImageSearchOptions
from .provider import GoogleSearchClient
from .selection import select_valid_images

logger = logging.getLogger(__name__)


def compute_fetch_count(num_results: int, validate_images: bool) -> int:
    """Number of candidates to request from the provider.

    With validation on, ``num_results`` plus the configured over-fetch margin,
    capped at the provider's per-call limit.
    """
    if not validate_images:
        return num_results
    margin = get_settings().image_overfetch_margin
    return min(num_results + margin, MAX_NUM_RESULTS)


async def search_text(
    query: str,
    num_results: int,
    provider: GoogleSearchClient | None = None,
) -> str:
    """Run a web search and return the formatted results.

    Raises:
        SearchError: If the provider call fails
        ConfigurationError: If the provider is not configured
    """
    provider = provider or GoogleSearchClient.from_settings()
    results = await provider.search(query, num_results)
    return format_search_results(results)


async def search_images(
    query: str,
    num_results: int,
    *,
    validate_images: bool = False,
    options: ImageSearchOptions | None = None,
    provider: GoogleSearchClient | None = None,
) -> str:
    """Run an image search, optionally dropping dead or placeholder images.

    Args:
        query: Image search query
        num_results: Number of images the caller wants (1-10)
        validate_images: Probe every candidate URL and keep only real images
        options: Optional provider-side filters
        provider: Search client; built from settings when omitted

    Returns:
        Formatted results, prefixed with a validation summary when validating

    Raises:
        SearchError: If the provider call fails
        ConfigurationError: If the provider is not configured
    """
    provider = provider or GoogleSearchClient.from_settings()
    fetch_count = compute_fetch_count(num_results, validate_images)

    candidates = await provider.image_search(query, fetch_count, options)
    if not candidates:
        return NO_IMAGE_RESULTS_MESSAGE

    if not validate_images:
        return format_image_search_results(candidates)

    logger.info("Validating %d image results...", len(candidates))
    verdicts = await validate_image_urls(candidates)
    selection = select_valid_images(candidates, verdicts, num_results)

    if not selection.items:
        return NO_VALID_IMAGES_MESSAGE

    return f"{selection.summary()}\n\n{format_image_search_results(selection.items)}"
