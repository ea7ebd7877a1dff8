"""Image URL validation for image search results.

Search providers regularly return image links that are dead, redirect to an
HTML page, or serve a tiny placeholder. This module weeds those out using
only what HTTP tells us:

- ``check_image_exists``: HEAD probe, then a streamed GET probe whose headers
  must describe a reasonably sized image. Never raises.
- ``validate_image_urls``: runs the check concurrently for every candidate,
  each raced against a hard ceiling, and returns one verdict per unique URL.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable

import httpx

from google_search_mcp.config import get_settings

from .models import CandidateResult

logger = logging.getLogger(__name__)

ImageChecker = Callable[[str], Awaitable[bool]]


async def check_image_exists(
    url: str,
    client: httpx.AsyncClient | None = None,
    *,
    head_timeout: float | None = None,
    get_timeout: float | None = None,
    min_bytes: int | None = None,
) -> bool:
    """Check that ``url`` serves a real, non-placeholder image.

    A failed HEAD probe rejects the URL without issuing the GET. The GET body
    is never read, only its status and headers.

    Args:
        url: Image URL to check
        client: Shared HTTP client; a temporary one is created when omitted
        head_timeout: Deadline in seconds for the HEAD probe
        get_timeout: Deadline in seconds for the GET probe
        min_bytes: Smallest acceptable content-length

    Returns:
        True if the URL looks like a valid image, False on any failure
    """
    settings = get_settings()
    head_timeout = settings.image_head_timeout if head_timeout is None else head_timeout
    get_timeout = settings.image_get_timeout if get_timeout is None else get_timeout
    min_bytes = settings.image_min_bytes if min_bytes is None else min_bytes

    try:
        if client is None:
            async with _create_client() as own_client:
                return await _probe(own_client, url, head_timeout, get_timeout, min_bytes)
        return await _probe(client, url, head_timeout, get_timeout, min_bytes)
    except TimeoutError:
        logger.debug("Image check timed out: %s", url)
        return False
    except httpx.HTTPError as e:
        logger.debug("Image check failed for %s: %s", url, e)
        return False
    except Exception as e:
        logger.warning("Unexpected error checking image URL %s: %s", url, e)
        return False


async def _probe(
    client: httpx.AsyncClient,
    url: str,
    head_timeout: float,
    get_timeout: float,
    min_bytes: int,
) -> bool:
    async with asyncio.timeout(head_timeout):
        head_response = await client.head(url)
    if not head_response.is_success:
        logger.debug("HEAD %s returned %s", url, head_response.status_code)
        return False

    async with asyncio.timeout(get_timeout):
        async with client.stream("GET", url) as get_response:
            if not get_response.is_success:
                logger.debug("GET %s returned %s", url, get_response.status_code)
                return False
            content_type = get_response.headers.get("content-type", "")
            content_length = get_response.headers.get("content-length")

    if not content_type.strip().lower().startswith("image/"):
        logger.debug("Not an image (%s): %s", content_type or "no content-type", url)
        return False

    if content_length is not None:
        try:
            size = int(content_length)
        except ValueError:
            logger.debug("Malformed content-length %r: %s", content_length, url)
            return False
        if size < min_bytes:
            # Placeholders and tracking pixels
            logger.debug("Image too small (%d bytes): %s", size, url)
            return False

    return True


async def validate_image_urls(
    candidates: Iterable[CandidateResult],
    *,
    checker: ImageChecker | None = None,
    ceiling: float | None = None,
) -> dict[str, bool]:
    """Validate candidate image URLs concurrently.

    Every unique URL is checked exactly once. Each check is raced against
    ``ceiling``; a check that has not finished by then counts as invalid and
    is cancelled. The call waits for every check, so its duration is bounded
    by the ceiling rather than by the slowest server.

    Args:
        candidates: Search results to validate; entries without a URL are skipped
        checker: Coroutine function mapping a URL to a verdict. Defaults to
            ``check_image_exists`` sharing one HTTP client across the batch
        ceiling: Per-URL backstop in seconds

    Returns:
        Mapping of URL to verdict
    """
    urls = list(dict.fromkeys(c.url for c in candidates if c.url))
    if not urls:
        return {}

    ceiling = get_settings().image_check_ceiling if ceiling is None else ceiling
    logger.info("Validating %d image URLs", len(urls))

    if checker is not None:
        verdicts = await _run_checks(urls, checker, ceiling)
    else:
        async with _create_client() as client:

            async def shared_client_checker(url: str) -> bool:
                return await check_image_exists(url, client)

            verdicts = await _run_checks(urls, shared_client_checker, ceiling)

    results = dict(zip(urls, verdicts, strict=True))
    logger.info(
        "Image validation finished: %d of %d URLs valid",
        sum(results.values()),
        len(results),
    )
    return results


async def _run_checks(
    urls: list[str],
    checker: ImageChecker,
    ceiling: float,
) -> list[bool]:
    return await asyncio.gather(
        *(_check_with_ceiling(url, checker, ceiling) for url in urls),
    )


async def _check_with_ceiling(url: str, checker: ImageChecker, ceiling: float) -> bool:
    task = asyncio.ensure_future(checker(url))
    try:
        done, _ = await asyncio.wait({task}, timeout=ceiling)
    finally:
        # Also reached when the batch itself is cancelled. Cancellation is best
        # effort; a checker that swallows it keeps running and is discarded.
        if not task.done():
            task.cancel()

    if task not in done:
        logger.warning("Image check exceeded %.1fs ceiling: %s", ceiling, url)
        return False

    if task.cancelled():
        return False
    if task.exception() is not None:
        logger.warning("Error validating image %s: %s", url, task.exception())
        return False
    return bool(task.result())


def _create_client() -> httpx.AsyncClient:
    # Probe deadlines are enforced with asyncio.timeout, not per-socket timeouts
    return httpx.AsyncClient(
        timeout=None,
        follow_redirects=True,
        headers={"User-Agent": get_settings().user_agent},
    )
