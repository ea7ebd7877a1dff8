"""Search services: provider client, image validation, selection and formatting."""

from .formatting import format_image_search_results, format_search_results
from .image_validation import check_image_exists, validate_image_urls
from .models import (
    CandidateResult,
    ImageSearchArguments,
    ImageSearchOptions,
    SearchArguments,
    SelectionResult,
)
from .provider import GoogleSearchClient
from .search import compute_fetch_count, search_images, search_text
from .selection import select_valid_images

__all__ = [
    "CandidateResult",
    "GoogleSearchClient",
    "ImageSearchArguments",
    "ImageSearchOptions",
    "SearchArguments",
    "SelectionResult",
    "check_image_exists",
    "compute_fetch_count",
    "format_image_search_results",
    "format_search_results",
    "search_images",
    "search_text",
    "select_valid_images",
    "validate_image_urls",
]
