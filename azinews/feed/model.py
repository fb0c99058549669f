from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from azinews.news.model import NewsItem, NewsSourceDescriptor


@dataclass(frozen=True)
class SourceResult:
    """Outcome of fetching and extracting one source: items on success, the error otherwise."""
    source: NewsSourceDescriptor
    items: List[NewsItem] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class FeedStatus(Enum):
    """Lifecycle of the aggregated news feed as seen by a presentation layer."""
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"


@dataclass(frozen=True)
class FeedSnapshot:
    status: FeedStatus = FeedStatus.IDLE
    items: List[NewsItem] = field(default_factory=list)
    failed_sources: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True only once loading completed without a single item."""
        return self.status == FeedStatus.LOADED and not self.items
