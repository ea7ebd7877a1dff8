"""
Shared pytest fixtures and configuration for all tests.

Network access is never needed: the provider and image URLs are served by
httpx.MockTransport handlers or replaced with AsyncMock collaborators.
"""

import os
from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

# Set test environment variables BEFORE any imports of the server
os.environ.setdefault("GOOGLE_API_KEY", "test-api-key")
os.environ.setdefault("GOOGLE_SEARCH_ENGINE_ID", "test-engine-id")

from google_search_mcp.config import reset_settings
from google_search_mcp.services.models import CandidateResult
from google_search_mcp.services.provider import GoogleSearchClient


@pytest.fixture(autouse=True)
def fresh_settings():
    """Rebuild settings from the environment for every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_candidate() -> Callable[..., CandidateResult]:
    """Factory for image candidates with sensible defaults."""

    def _make(url: str | None, **kwargs) -> CandidateResult:
        defaults = {
            "title": f"Image at {url}",
            "thumbnail_url": f"{url}?thumb" if url else None,
            "source_context_url": "https://example.com/gallery",
            "width": 800,
            "height": 600,
        }
        defaults.update(kwargs)
        return CandidateResult(url=url, **defaults)

    return _make


@pytest.fixture
def image_candidates(make_candidate) -> list[CandidateResult]:
    """Ten distinct image candidates in provider ranking order."""
    return [make_candidate(f"https://img.example.com/{i}.jpg") for i in range(10)]


@pytest.fixture
def mock_provider() -> MagicMock:
    """Provider double with awaitable search methods."""
    provider = MagicMock(spec=GoogleSearchClient)
    provider.search = AsyncMock(return_value=[])
    provider.image_search = AsyncMock(return_value=[])
    return provider


@pytest.fixture
def mock_http_client() -> Callable[..., httpx.AsyncClient]:
    """Build an AsyncClient whose requests are answered by ``handler``."""

    def _build(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            follow_redirects=True,
        )

    return _build
