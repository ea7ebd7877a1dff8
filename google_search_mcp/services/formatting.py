"""Plain-text rendering of search results for MCP text content blocks."""

from collections.abc import Sequence

from google_search_mcp.core.constants import (
    NO_IMAGE_RESULTS_MESSAGE,
    NO_RESULTS_MESSAGE,
    RESULT_SEPARATOR,
)

from .models import CandidateResult


def format_search_results(items: Sequence[CandidateResult]) -> str:
    """Format web search results as numbered blocks."""
    if not items:
        return NO_RESULTS_MESSAGE

    blocks = [
        "\n".join(
            [
                f"Result {index}:",
                f"Title: {item.title or 'No title'}",
                f"URL: {item.url or 'No URL'}",
                f"Description: {item.snippet or 'No description'}",
                RESULT_SEPARATOR,
            ],
        )
        for index, item in enumerate(items, start=1)
    ]
    return "\n\n".join(blocks)


def format_image_search_results(items: Sequence[CandidateResult]) -> str:
    """Format image search results as numbered blocks.

    Unknown dimensions are shown as ``?``, e.g. ``Size: 640x?``.
    """
    if not items:
        return NO_IMAGE_RESULTS_MESSAGE

    blocks = [
        "\n".join(
            [
                f"Image {index}:",
                f"Title: {item.title or 'No title'}",
                f"Image URL: {item.url or 'No URL'}",
                f"Thumbnail URL: {item.thumbnail_url or 'No thumbnail'}",
                f"Source: {item.source_context_url or 'Unknown source'}",
                f"Size: {item.width or '?'}x{item.height or '?'}",
                RESULT_SEPARATOR,
            ],
        )
        for index, item in enumerate(items, start=1)
    ]
    return "\n\n".join(blocks)
