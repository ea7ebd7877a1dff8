"""Pydantic models for the search pipeline.

This module contains the type-safe data structures passed between the tool
layer, the provider client, the image validation pipeline and the formatter.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from google_search_mcp.core.constants import (
    DEFAULT_NUM_RESULTS,
    MAX_NUM_RESULTS,
    MIN_NUM_RESULTS,
)


class ImageSize(str, Enum):
    """Size filter accepted by the Custom Search API."""

    HUGE = "huge"
    ICON = "icon"
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"
    XLARGE = "xlarge"
    XXLARGE = "xxlarge"


class ImageType(str, Enum):
    """Image type filter."""

    CLIPART = "clipart"
    FACE = "face"
    LINEART = "lineart"
    STOCK = "stock"
    PHOTO = "photo"
    ANIMATED = "animated"


class DominantColor(str, Enum):
    """Dominant color filter."""

    BLACK = "black"
    BLUE = "blue"
    BROWN = "brown"
    GRAY = "gray"
    GREEN = "green"
    ORANGE = "orange"
    PINK = "pink"
    PURPLE = "purple"
    RED = "red"
    TEAL = "teal"
    WHITE = "white"
    YELLOW = "yellow"


class ColorType(str, Enum):
    """Color type filter."""

    COLOR = "color"
    GRAY = "gray"
    MONO = "mono"
    TRANS = "trans"


class CandidateResult(BaseModel):
    """A single search result as returned by the provider.

    Providers occasionally return items without a link; those are shown with
    a placeholder and never validated. Every other field may be missing
    depending on the provider and on whether this is a text or an image result.
    """

    model_config = ConfigDict(frozen=True)

    url: str | None = Field(
        default=None,
        description="Result link (the image itself for images)",
    )
    title: str | None = None
    snippet: str | None = None
    thumbnail_url: str | None = None
    source_context_url: str | None = None
    width: int | None = None
    height: int | None = None


class ImageSearchOptions(BaseModel):
    """Optional provider-side filters for image search."""

    model_config = ConfigDict(frozen=True)

    img_size: ImageSize | None = None
    img_type: ImageType | None = None
    img_dominant_color: DominantColor | None = None
    img_color_type: ColorType | None = None

    def to_query_params(self) -> dict[str, str]:
        """Return only the filters that were set, keyed by API parameter name."""
        params = {
            "imgSize": self.img_size,
            "imgType": self.img_type,
            "imgDominantColor": self.img_dominant_color,
            "imgColorType": self.img_color_type,
        }
        return {key: value.value for key, value in params.items() if value is not None}


class SearchArguments(BaseModel):
    """Arguments of the ``search`` tool."""

    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(min_length=1)
    num_results: int = Field(
        default=DEFAULT_NUM_RESULTS,
        ge=MIN_NUM_RESULTS,
        le=MAX_NUM_RESULTS,
        alias="numResults",
    )


class ImageSearchArguments(SearchArguments):
    """Arguments of the ``imageSearch`` tool."""

    validate_images: bool = Field(default=False, alias="validateImages")
    img_size: ImageSize | None = Field(default=None, alias="imgSize")
    img_type: ImageType | None = Field(default=None, alias="imgType")
    img_dominant_color: DominantColor | None = Field(
        default=None,
        alias="imgDominantColor",
    )
    img_color_type: ColorType | None = Field(default=None, alias="imgColorType")

    @property
    def options(self) -> ImageSearchOptions:
        return ImageSearchOptions(
            img_size=self.img_size,
            img_type=self.img_type,
            img_dominant_color=self.img_dominant_color,
            img_color_type=self.img_color_type,
        )


class SelectionResult(BaseModel):
    """Outcome of filtering candidates by their validation verdicts."""

    model_config = ConfigDict(frozen=True)

    items: tuple[CandidateResult, ...] = ()
    total_valid: int = Field(default=0, ge=0)
    total_checked: int = Field(default=0, ge=0)

    @property
    def returned_count(self) -> int:
        return len(self.items)

    def summary(self) -> str:
        """One-line validation summary shown above the results."""
        return (
            f"Found {self.total_valid} valid images out of "
            f"{self.total_checked} search results. "
            f"Returning {self.returned_count} images."
        )

