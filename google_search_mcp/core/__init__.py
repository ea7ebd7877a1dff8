"""Core functionality for the Google Custom Search MCP server."""

from .constants import (
    DEFAULT_NUM_RESULTS,
    MAX_NUM_RESULTS,
    MIN_NUM_RESULTS,
    NO_IMAGE_RESULTS_MESSAGE,
    NO_RESULTS_MESSAGE,
    NO_VALID_IMAGES_MESSAGE,
)
from .decorators import track_request
from .exceptions import MCPToolError
from .logging import configure_logging, logger

__all__ = [
    # Core
    "MCPToolError",
    "configure_logging",
    "logger",
    "track_request",
    # Constants - most commonly used
    "DEFAULT_NUM_RESULTS",
    "MAX_NUM_RESULTS",
    "MIN_NUM_RESULTS",
    "NO_IMAGE_RESULTS_MESSAGE",
    "NO_RESULTS_MESSAGE",
    "NO_VALID_IMAGES_MESSAGE",
]
