"""Tests for request tracking (google_search_mcp/core/decorators.py)."""

import pytest

from google_search_mcp.core.decorators import track_request
from google_search_mcp.core.logging import request_id_ctx


@pytest.mark.asyncio
class TestTrackRequest:
    async def test_request_id_set_during_call(self):
        seen = []

        @track_request("lookup")
        async def tool() -> str:
            seen.append(request_id_ctx.get())
            return "ok"

        assert await tool() == "ok"
        assert seen[0] is not None
        assert len(seen[0]) == 8
        assert request_id_ctx.get() is None

    async def test_errors_reraised(self):
        @track_request("lookup")
        async def tool() -> str:
            raise ValueError("bad")

        with pytest.raises(ValueError, match="bad"):
            await tool()
        assert request_id_ctx.get() is None
