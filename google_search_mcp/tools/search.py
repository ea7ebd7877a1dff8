"""
Search tools for MCP server.

This module contains the search-related MCP tools:
- search: Web search through Google Custom Search
- imageSearch: Image search with optional validation of the image URLs

Errors are classified here: bad arguments fail the tool call, provider
failures come back as a readable "Search failed" text result.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, TypeVar

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

if TYPE_CHECKING:
    from fastmcp import FastMCP

from google_search_mcp.core import (
    DEFAULT_NUM_RESULTS,
    MAX_NUM_RESULTS,
    MIN_NUM_RESULTS,
    MCPToolError,
    track_request,
)
from google_search_mcp.core.exceptions import (
    ConfigurationError,
    InputValidationError,
    SearchError,
)
from google_search_mcp.services import (
    ImageSearchArguments,
    SearchArguments,
    search_images,
    search_text,
)
from google_search_mcp.services.models import (
    ColorType,
    DominantColor,
    ImageSize,
    ImageType,
)

logger = logging.getLogger(__name__)

ArgumentsT = TypeVar("ArgumentsT", bound=BaseModel)

# Advertised in the tool schema only; parse_arguments enforces them.
QueryArg = Annotated[str, Field(json_schema_extra={"minLength": 1})]
NumResultsArg = Annotated[
    int,
    Field(json_schema_extra={"minimum": MIN_NUM_RESULTS, "maximum": MAX_NUM_RESULTS}),
]


def choice_arg(choices: type[Enum]) -> Any:
    """Optional string argument advertising the values of ``choices``."""
    return Annotated[
        str | None,
        Field(json_schema_extra={"enum": [*(choice.value for choice in choices), None]}),
    ]


ImageSizeArg = choice_arg(ImageSize)
ImageTypeArg = choice_arg(ImageType)
DominantColorArg = choice_arg(DominantColor)
ColorTypeArg = choice_arg(ColorType)


def parse_arguments(model: type[ArgumentsT], **raw: Any) -> ArgumentsT:
    """Validate raw tool arguments against ``model``.

    Raises:
        InputValidationError: With one field-qualified message per bad argument
    """
    try:
        return model.model_validate(raw)
    except PydanticValidationError as e:
        errors = [
            (".".join(str(part) for part in error["loc"]) or "arguments", error["msg"])
            for error in e.errors()
        ]
        raise InputValidationError(errors) from e


def register_search_tools(mcp: "FastMCP") -> None:
    """
    Register search-related MCP tools.

    Args:
        mcp: FastMCP instance to register tools with
    """

    @mcp.tool(name="search")
    @track_request("search")
    async def search(
        query: QueryArg,
        numResults: NumResultsArg = DEFAULT_NUM_RESULTS,  # noqa: N803
    ) -> str:
        """
        Search the web using Google Custom Search API.

        Args:
            query: The search query
            numResults: Number of results to return (1-10, default: 5)

        Returns:
            Numbered list of results with title, URL and description.
        """
        try:
            args = parse_arguments(SearchArguments, query=query, numResults=numResults)
        except InputValidationError as e:
            logger.warning("Rejected search arguments: %s", e)
            raise MCPToolError(str(e)) from e

        try:
            return await search_text(args.query, args.num_results)
        except (SearchError, ConfigurationError) as e:
            logger.error("Search failed: %s", e)
            return f"Search failed: {e!s}"
        except Exception as e:
            logger.exception("Unexpected error in search tool")
            msg = f"Search failed: {e!s}"
            raise MCPToolError(msg) from e

    @mcp.tool(name="imageSearch")
    @track_request("imageSearch")
    async def image_search(  # noqa: PLR0913
        query: QueryArg,
        numResults: NumResultsArg = DEFAULT_NUM_RESULTS,  # noqa: N803
        validateImages: bool = False,  # noqa: N803
        imgSize: ImageSizeArg = None,  # noqa: N803
        imgType: ImageTypeArg = None,  # noqa: N803
        imgDominantColor: DominantColorArg = None,  # noqa: N803
        imgColorType: ColorTypeArg = None,  # noqa: N803
    ) -> str:
        """
        Search for images using Google Custom Search API.

        With `validateImages=true` extra candidates are fetched and every image
        URL is probed; dead links, non-image pages and tiny placeholders are
        dropped before the requested number of results is returned.

        Args:
            query: The image search query
            numResults: Number of image results to return (1-10, default: 5)
            validateImages: Check that image URLs are reachable real images
            imgSize: huge, icon, large, medium, small, xlarge or xxlarge
            imgType: clipart, face, lineart, stock, photo or animated
            imgDominantColor: black, blue, brown, gray, green, orange, pink,
                purple, red, teal, white or yellow
            imgColorType: color, gray, mono or trans

        Returns:
            Numbered list of images with URLs, source page and dimensions.
        """
        try:
            args = parse_arguments(
                ImageSearchArguments,
                query=query,
                numResults=numResults,
                validateImages=validateImages,
                imgSize=imgSize,
                imgType=imgType,
                imgDominantColor=imgDominantColor,
                imgColorType=imgColorType,
            )
        except InputValidationError as e:
            logger.warning("Rejected imageSearch arguments: %s", e)
            raise MCPToolError(str(e)) from e

        try:
            return await search_images(
                args.query,
                args.num_results,
                validate_images=args.validate_images,
                options=args.options,
            )
        except (SearchError, ConfigurationError) as e:
            logger.error("Image search failed: %s", e)
            return f"Search failed: {e!s}"
        except Exception as e:
            logger.exception("Unexpected error in imageSearch tool")
            msg = f"Search failed: {e!s}"
            raise MCPToolError(msg) from e
