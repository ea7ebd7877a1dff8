"""
Google Custom Search MCP Server.

MCP tools for web and image search through the Google Custom Search JSON API,
with concurrent validation of image result URLs.
"""

__version__ = "1.0.0"

from google_search_mcp.config.settings import Settings, get_settings, reset_settings
from google_search_mcp.core.decorators import track_request
from google_search_mcp.core.exceptions import (
    ConfigurationError,
    GoogleSearchMCPError,
    InputValidationError,
    MCPToolError,
    SearchError,
)
from google_search_mcp.services import (
    CandidateResult,
    GoogleSearchClient,
    SelectionResult,
    check_image_exists,
    search_images,
    search_text,
    select_valid_images,
    validate_image_urls,
)
from google_search_mcp.tools import register_tools

__all__ = [
    "CandidateResult",
    "ConfigurationError",
    "GoogleSearchClient",
    "GoogleSearchMCPError",
    "InputValidationError",
    "MCPToolError",
    "SearchError",
    "SelectionResult",
    "Settings",
    "__version__",
    "check_image_exists",
    "get_settings",
    "register_tools",
    "reset_settings",
    "search_images",
    "search_text",
    "select_valid_images",
    "track_request",
    "validate_image_urls",
]
