"""Google Custom Search JSON API client.

The provider is a black box to the rest of the pipeline: a query, a count and
optional filters go in, a ranked list of ``CandidateResult`` comes out. Any
failure talking to the API is raised as ``SearchError``.
"""

import logging
from typing import Any

import httpx

from google_search_mcp.config import Settings, get_settings
from google_search_mcp.core.constants import (
    IMAGE_DUPLICATE_FILTER,
    IMAGE_SAFE_MODE,
    MAX_NUM_RESULTS,
)
from google_search_mcp.core.exceptions import ConfigurationError, SearchError

from .models import CandidateResult, ImageSearchOptions

logger = logging.getLogger(__name__)


class GoogleSearchClient:
    """Thin async client for the ``customsearch/v1`` endpoint."""

    def __init__(
        self,
        api_key: str,
        search_engine_id: str,
        *,
        base_url: str = "https://www.googleapis.com/customsearch/v1",
        timeout: float = 30,
        user_agent: str = "Google-Search-MCP-Server/1.0",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.search_engine_id = search_engine_id
        self.base_url = base_url
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "GoogleSearchClient":
        """Build a client from settings.

        Raises:
            ConfigurationError: If the API key or search engine ID is missing
        """
        settings = settings or get_settings()
        if not settings.has_google_config():
            missing = ", ".join(settings.missing_google_config())
            msg = f"Google Custom Search is not configured (missing {missing})"
            raise ConfigurationError(msg)
        return cls(
            api_key=settings.google_api_key or "",
            search_engine_id=settings.google_search_engine_id or "",
            base_url=settings.google_search_base_url,
            timeout=settings.google_search_timeout,
            user_agent=settings.user_agent,
        )

    async def search(self, query: str, num_results: int) -> list[CandidateResult]:
        """Run a web search and return up to ``num_results`` ranked results."""
        return await self._list({"q": query, "num": _clamp(num_results)})

    async def image_search(
        self,
        query: str,
        num_results: int,
        options: ImageSearchOptions | None = None,
    ) -> list[CandidateResult]:
        """Run an image search with the duplicate filter and safe search on.

        Filters that are not set in ``options`` are left out of the request.
        """
        params: dict[str, Any] = {
            "q": query,
            "num": _clamp(num_results),
            "searchType": "image",
            "filter": IMAGE_DUPLICATE_FILTER,
            "safe": IMAGE_SAFE_MODE,
        }
        if options is not None:
            params.update(options.to_query_params())
        return await self._list(params)

    async def _list(self, params: dict[str, Any]) -> list[CandidateResult]:
        query_params = {"key": self.api_key, "cx": self.search_engine_id, **params}
        logger.debug(
            "Custom Search request: q=%r num=%s type=%s",
            params.get("q"),
            params.get("num"),
            params.get("searchType", "web"),
        )

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                transport=self._transport,
            ) as client:
                response = await client.get(self.base_url, params=query_params)
        except httpx.TimeoutException as e:
            msg = f"Search request timed out after {self.timeout}s"
            raise SearchError(msg) from e
        except httpx.HTTPError as e:
            msg = f"Search request failed: {e!s}"
            raise SearchError(msg) from e

        if response.status_code != 200:
            msg = f"Search API returned HTTP {response.status_code}: {_error_message(response)}"
            raise SearchError(msg, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            msg = "Search API returned an invalid JSON response"
            raise SearchError(msg) from e

        items = (data.get("items") or []) if isinstance(data, dict) else None
        if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
            msg = "Search API returned an unexpected response"
            raise SearchError(msg)

        logger.info("Custom Search returned %d items", len(items))
        return [_parse_item(item) for item in items]


def _clamp(num_results: int) -> int:
    return max(1, min(num_results, MAX_NUM_RESULTS))


def _error_message(response: httpx.Response) -> str:
    """Pull the human-readable message out of a Google API error body."""
    try:
        error = response.json().get("error", {})
    except ValueError:
        return response.reason_phrase or "unknown error"
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return response.reason_phrase or "unknown error"


def _parse_item(item: dict[str, Any]) -> CandidateResult:
    image = item.get("image")
    if not isinstance(image, dict):
        image = {}
    return CandidateResult(
        url=item.get("link") or None,
        title=item.get("title"),
        snippet=item.get("snippet"),
        thumbnail_url=image.get("thumbnailLink"),
        source_context_url=image.get("contextLink"),
        width=_as_int(image.get("width")),
        height=_as_int(image.get("height")),
    )


def _as_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
