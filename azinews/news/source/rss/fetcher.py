import asyncio
from typing import Optional

import aiohttp

from azinews.config import CONFIG
from azinews.news.errors import FetchError
from azinews.news.model import NewsSourceDescriptor
from azinews.logging_config import create_logger


logger = create_logger("FeedFetcher")


def get_client_timeout(timeout_seconds: Optional[float] = None) -> aiohttp.ClientTimeout:
    if timeout_seconds is None:
        timeout_seconds = CONFIG.FEED_FETCH_TIMEOUT_SECONDS
    return aiohttp.ClientTimeout(total=timeout_seconds)


async def fetch_feed(session: aiohttp.ClientSession, source: NewsSourceDescriptor) -> bytes:
    """Download the raw RSS body of a news source with a single GET request."""
    try:
        async with session.get(source.endpoint) as response:
            if not 200 <= response.status < 300:
                raise FetchError(source.name, f"HTTP {response.status} when fetching {source.endpoint}", status=response.status)

            body = await response.read()

    except asyncio.TimeoutError as e:
        raise FetchError(source.name, f"Timed out fetching {source.endpoint}") from e
    except aiohttp.ClientError as e:
        raise FetchError(source.name, f"Error fetching {source.endpoint}: {e}") from e

    logger.debug(f"Fetched {len(body)} bytes from {source.endpoint}")
    return body
