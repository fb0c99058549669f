from typing import Callable, List, Optional, Sequence

from azinews.feed.aggregator import FeedAggregator, merge_source_results
from azinews.feed.model import FeedSnapshot, FeedStatus
from azinews.news.model import NewsSourceDescriptor
from azinews.news.source.registry import NewsSourceRegistry
from azinews.logging_config import create_logger


FeedListener = Callable[[FeedSnapshot], None]


class NewsFeedController:
    """
    Drives the Idle -> Loading -> Loaded lifecycle of the aggregated feed.

    Presentation code subscribes to snapshots instead of polling a loading flag.
    A refresh that is overtaken by a newer one is discarded when it completes.
    """

    def __init__(self, aggregator: Optional[FeedAggregator] = None, sources: Optional[Sequence[NewsSourceDescriptor]] = None):
        self.aggregator = aggregator or FeedAggregator()
        self.sources = list(sources) if sources is not None else NewsSourceRegistry.get_all_sources()
        self.logger = create_logger("NewsFeedController")
        self._snapshot = FeedSnapshot()
        self._listeners: List[FeedListener] = []
        self._generation = 0

    @property
    def snapshot(self) -> FeedSnapshot:
        return self._snapshot

    def subscribe(self, listener: FeedListener) -> Callable[[], None]:
        """Register a listener for snapshot transitions; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def refresh(self) -> FeedSnapshot:
        self._generation += 1
        generation = self._generation

        # Previous items stay visible while loading
        self._transition(FeedSnapshot(
            status=FeedStatus.LOADING,
            items=self._snapshot.items,
            failed_sources=self._snapshot.failed_sources,
        ))

        results = await self.aggregator.collect(self.sources)

        if generation != self._generation:
            self.logger.debug(f"Discarding stale refresh #{generation}; refresh #{self._generation} is in flight")
            return self._snapshot

        self._transition(FeedSnapshot(
            status=FeedStatus.LOADED,
            items=merge_source_results(results),
            failed_sources=[result.source.name for result in results if not result.ok],
        ))
        return self._snapshot

    def _transition(self, snapshot: FeedSnapshot):
        self._snapshot = snapshot
        self.logger.debug(f"Feed status: {snapshot.status.value} ({len(snapshot.items)} items)")

        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                self.logger.error(f"Error notifying feed listener {listener}: {e}")
