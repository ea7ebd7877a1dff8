"""
Main entry point for the Google Custom Search MCP server.

Exposes the `search` and `imageSearch` tools over stdio, streamable-http or sse.
"""

import asyncio
import sys
import traceback

from fastmcp import FastMCP
from fastmcp.server.auth import StaticTokenVerifier

from google_search_mcp.config import Settings, get_settings
from google_search_mcp.core import configure_logging, logger
from google_search_mcp.tools import register_tools

SERVER_NAME = "Google Custom Search MCP Server"

# Normalize transport names to FastMCP Transport literals
TRANSPORT_MAP = {
    "http": "streamable-http",
    "streamable-http": "streamable-http",
    "sse": "sse",
    "stdio": "stdio",
}


def build_auth(settings: Settings) -> StaticTokenVerifier | None:
    """Return a static bearer-token verifier when MCP_API_KEY is set."""
    if not settings.mcp_api_key:
        if settings.transport.lower() != "stdio":
            logger.warning("⚠ No authentication configured - server is open to all!")
            logger.warning("  Set MCP_API_KEY for API key auth")
        return None

    logger.info("Configuring Static Token Verifier...")
    return StaticTokenVerifier(
        tokens={
            settings.mcp_api_key: {
                "client_id": "mcp-client",
                "scopes": ["read"],
                "expires_at": None,  # No expiration
            },
        },
    )


def create_mcp_server(settings: Settings | None = None) -> FastMCP:
    """Create a FastMCP server with all tools registered."""
    settings = settings or get_settings()
    server = FastMCP(SERVER_NAME, auth=build_auth(settings))
    register_tools(server)
    return server


# Get settings instance
settings = get_settings()
configure_logging(debug=settings.debug)

try:
    logger.info("Initializing FastMCP server...")
    mcp = create_mcp_server(settings)
    logger.info("FastMCP server initialized successfully")
except Exception as e:
    logger.error(f"Failed to initialize FastMCP server: {e}")
    logger.error(f"Traceback: {traceback.format_exc()}")
    sys.exit(1)


async def main() -> None:
    """
    Main async function to run the MCP server.
    """
    if not settings.has_google_config():
        logger.error(
            "Invalid environment: missing %s",
            ", ".join(settings.missing_google_config()),
        )
        sys.exit(1)

    logger.debug("Settings: %s", settings.to_dict())

    transport = settings.transport.lower()
    fastmcp_transport = TRANSPORT_MAP.get(transport, "stdio")
    logger.info(f"Transport mode: {fastmcp_transport}")

    try:
        if fastmcp_transport in ("streamable-http", "sse"):
            logger.info(
                "Setting up %s server on %s:%s...",
                fastmcp_transport,
                settings.host,
                settings.port,
            )
            await mcp.run_async(
                transport=fastmcp_transport,  # type: ignore[arg-type]
                host=settings.host,
                port=settings.port,
            )
        else:
            logger.info(f"{SERVER_NAME} running on stdio")
            await mcp.run_async(transport="stdio")
    except Exception as e:
        logger.error(f"Error in main function: {e}")
        logger.error(f"Traceback: {traceback.format_exc()}")
        raise


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Server stopped")


if __name__ == "__main__":
    run()
