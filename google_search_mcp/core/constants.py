"""Application-wide constants for the Google Custom Search MCP Server.

Timeouts and thresholds that operators may want to tune live in Settings;
the values here are the fixed limits of the tool surface and the provider.
"""

# ========================================
# Result Count Limits
# ========================================

MIN_NUM_RESULTS = 1
MAX_NUM_RESULTS = 10  # Custom Search API returns at most 10 items per call
DEFAULT_NUM_RESULTS = 5

# ========================================
# Image Search Filters
# ========================================

# Provider-side flags fixed on for every image query
IMAGE_DUPLICATE_FILTER = "1"
IMAGE_SAFE_MODE = "active"

# ========================================
# User-facing Messages
# ========================================

NO_RESULTS_MESSAGE = "No results found."
NO_IMAGE_RESULTS_MESSAGE = "No image results found."
NO_VALID_IMAGES_MESSAGE = (
    "No valid images found. "
    "All images either failed validation or returned placeholders."
)
RESULT_SEPARATOR = "---"
