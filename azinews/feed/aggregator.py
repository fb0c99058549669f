import asyncio
from typing import Awaitable, Callable, List, Optional, Sequence

import aiohttp

from azinews.feed.model import SourceResult
from azinews.news.errors import FeedError
from azinews.news.extractor import extract_news_items
from azinews.news.model import NewsItem, NewsSourceDescriptor
from azinews.news.source.registry import NewsSourceRegistry
from azinews.news.source.rss.fetcher import fetch_feed, get_client_timeout
from azinews.logging_config import create_logger


FeedFetcher = Callable[[aiohttp.ClientSession, NewsSourceDescriptor], Awaitable[bytes]]


class FeedAggregator:
    """
    Fetches every configured source concurrently and merges their news items.

    A failing source never fails the aggregation; it simply contributes no items.
    """

    def __init__(self, fetcher: FeedFetcher = fetch_feed, timeout_seconds: Optional[float] = None):
        self.fetcher = fetcher
        self.timeout_seconds = timeout_seconds
        self.logger = create_logger("FeedAggregator")

    async def collect(self, sources: Sequence[NewsSourceDescriptor]) -> List[SourceResult]:
        """Fetch and extract all sources, returning one result per source in the given order."""
        if not sources:
            return []

        async with aiohttp.ClientSession(timeout=get_client_timeout(self.timeout_seconds)) as session:
            # gather keeps argument order, so completion order never leaks into the result
            return list(await asyncio.gather(
                *(self._collect_source(session, source) for source in sources)
            ))

    async def aggregate(self, sources: Sequence[NewsSourceDescriptor]) -> List[NewsItem]:
        """Merge the items of all sources in configured order, dropping failed sources."""
        results = await self.collect(sources)
        return merge_source_results(results)

    async def _collect_source(self, session: aiohttp.ClientSession, source: NewsSourceDescriptor) -> SourceResult:
        try:
            raw_markup = await self.fetcher(session, source)
            items = extract_news_items(raw_markup, source.name)

        except FeedError as e:
            self.logger.error(f"Error collecting news from {source.name}: {e}")
            return SourceResult(source=source, error=e)
        except Exception as e:
            self.logger.error(f"Unexpected error collecting news from {source.name}: {e}")
            return SourceResult(source=source, error=e)

        if not items:
            self.logger.warning(f"No news items found in feed for {source.name}")
        else:
            self.logger.info(f"Successfully collected {len(items)} news items from {source.name}")

        return SourceResult(source=source, items=items)


def merge_source_results(results: Sequence[SourceResult]) -> List[NewsItem]:
    """Flatten successful results in order; failed ones contribute nothing."""
    merged: List[NewsItem] = []
    for result in results:
        if result.ok:
            merged.extend(result.items)
    return merged


async def fetch_news() -> List[NewsItem]:
    """Request refreshed news from every configured source."""
    return await FeedAggregator().aggregate(NewsSourceRegistry.get_all_sources())
