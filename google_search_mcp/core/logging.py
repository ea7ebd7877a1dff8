"""Logging configuration for the Google Custom Search MCP server.

Everything goes to stderr; stdout belongs to the stdio transport.
"""

import logging
import sys
from contextvars import ContextVar

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(request_id)s%(message)s"
PACKAGE_LOGGER = "google_search_mcp"

# Set by track_request for the duration of a tool call
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


class RequestIdFilter(logging.Filter):
    """Prefix records with the current tool call's request id."""

    def filter(self, record):
        request_id = request_id_ctx.get()
        record.request_id = f"[{request_id}] " if request_id else ""
        return True


def configure_logging(debug: bool = False) -> logging.Logger:
    """Set up stderr logging and return the package logger.

    Safe to call again: the second call from startup only applies the
    ``debug`` flag from settings.
    """
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    for handler in logging.root.handlers:
        if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
            handler.addFilter(RequestIdFilter())

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if debug:
        package_logger.debug("Debug mode enabled")

    return package_logger


logger = configure_logging()
