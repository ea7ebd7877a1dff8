"""
Unit tests for the Custom Search client (google_search_mcp/services/provider.py).

Requests are answered by an httpx.MockTransport so query parameters can be
inspected without network access.
"""

import httpx
import pytest

from google_search_mcp.config import Settings
from google_search_mcp.core.exceptions import ConfigurationError, SearchError
from google_search_mcp.services.models import ImageSearchOptions
from google_search_mcp.services.provider import GoogleSearchClient

IMAGE_ITEM = {
    "title": "A cat",
    "link": "https://img.example.com/cat.jpg",
    "snippet": "cat",
    "image": {
        "contextLink": "https://example.com/cats",
        "thumbnailLink": "https://thumbs.example.com/cat.jpg",
        "width": 1024,
        "height": 768,
    },
}


def build_client(handler) -> GoogleSearchClient:
    return GoogleSearchClient(
        "key-123",
        "cx-456",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
class TestGoogleSearchClient:
    """Test suite for GoogleSearchClient."""

    async def test_text_search_params_and_parsing(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200,
                json={
                    "items": [
                        {"title": "Python", "link": "https://python.org", "snippet": "Language"},
                    ],
                },
            )

        results = await build_client(handler).search("python", 3)

        params = requests[0].url.params
        assert params["key"] == "key-123"
        assert params["cx"] == "cx-456"
        assert params["q"] == "python"
        assert params["num"] == "3"
        assert "searchType" not in params
        assert results[0].url == "https://python.org"
        assert results[0].snippet == "Language"

    async def test_image_search_params(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"items": [IMAGE_ITEM]})

        options = ImageSearchOptions(img_size="large", img_dominant_color="blue")
        results = await build_client(handler).image_search("cats", 10, options)

        params = requests[0].url.params
        assert params["searchType"] == "image"
        assert params["num"] == "10"
        assert params["filter"] == "1"
        assert params["safe"] == "active"
        assert params["imgSize"] == "large"
        assert params["imgDominantColor"] == "blue"
        assert "imgType" not in params
        assert "imgColorType" not in params

        assert len(results) == 1
        item = results[0]
        assert item.url == "https://img.example.com/cat.jpg"
        assert item.thumbnail_url == "https://thumbs.example.com/cat.jpg"
        assert item.source_context_url == "https://example.com/cats"
        assert (item.width, item.height) == (1024, 768)

    async def test_image_search_without_options(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={})

        results = await build_client(handler).image_search("cats", 5)

        assert results == []
        assert not any(key.startswith("img") for key in requests[0].url.params)

    async def test_item_without_link(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"items": [{"title": "No link"}]})

        results = await build_client(handler).search("python", 1)

        assert results[0].url is None
        assert results[0].title == "No link"

    async def test_api_error_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                403,
                json={"error": {"code": 403, "message": "Daily Limit Exceeded"}},
            )

        with pytest.raises(SearchError) as exc_info:
            await build_client(handler).search("python", 3)

        assert exc_info.value.status_code == 403
        assert "Daily Limit Exceeded" in str(exc_info.value)

    async def test_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("name resolution failed", request=request)

        with pytest.raises(SearchError, match="name resolution failed"):
            await build_client(handler).search("python", 3)

    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(SearchError, match="timed out"):
            await build_client(handler).search("python", 3)

    async def test_invalid_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>oops</html>")

        with pytest.raises(SearchError, match="invalid JSON"):
            await build_client(handler).search("python", 3)

    @pytest.mark.parametrize(
        "payload",
        [["x"], "oops", {"items": "oops"}, {"items": ["x"]}],
    )
    async def test_unexpected_payload_shape(self, payload):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=payload)

        with pytest.raises(SearchError, match="unexpected response"):
            await build_client(handler).search("python", 3)

    async def test_non_dict_image_field_ignored(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={"items": [{"link": "https://img.example.com/a.jpg", "image": "oops"}]},
            )

        results = await build_client(handler).image_search("cats", 1)

        assert results[0].url == "https://img.example.com/a.jpg"
        assert results[0].thumbnail_url is None
        assert results[0].width is None


class TestFromSettings:
    """Test suite for GoogleSearchClient.from_settings()."""

    def test_missing_credentials(self):
        settings = Settings(google_api_key=None, google_search_engine_id=None)

        with pytest.raises(ConfigurationError) as exc_info:
            GoogleSearchClient.from_settings(settings)

        assert "GOOGLE_API_KEY" in str(exc_info.value)
        assert "GOOGLE_SEARCH_ENGINE_ID" in str(exc_info.value)

    def test_builds_from_settings(self):
        settings = Settings(
            google_api_key="abc",
            google_search_engine_id="engine",
            google_search_timeout=10,
        )

        client = GoogleSearchClient.from_settings(settings)

        assert client.api_key == "abc"
        assert client.search_engine_id == "engine"
        assert client.timeout == 10
