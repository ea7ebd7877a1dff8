"""Allow running the server with ``python -m google_search_mcp``."""

from google_search_mcp.main import run

run()
