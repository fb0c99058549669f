from typing import Dict, List, Optional

from azinews.news.model import NewsSourceDescriptor
from azinews.logging_config import create_logger


DIGI24 = NewsSourceDescriptor(
    name="Digi24",
    endpoint="https://www.digi24.ro/rss",
    description="Romanian general news from Digi24",
)

MEDIAFAX = NewsSourceDescriptor(
    name="Mediafax",
    endpoint="https://www.mediafax.ro/rss",
    description="Romanian news agency Mediafax",
)

# Order matters: aggregated items are merged in this order
NEWS_SOURCES = (DIGI24, MEDIAFAX)


class NewsSourceRegistry:
    """Read-only lookup over the compiled-in news source table."""

    _sources: Dict[str, NewsSourceDescriptor] = {source.name: source for source in NEWS_SOURCES}
    logger = create_logger("NewsSourceRegistry")

    @classmethod
    def get_all_sources(cls) -> List[NewsSourceDescriptor]:
        """Get all configured news sources in aggregation order."""
        return list(cls._sources.values())

    @classmethod
    def get_source_by_name(cls, source_name: str) -> Optional[NewsSourceDescriptor]:
        """Get a news source by name."""
        return cls._sources.get(source_name)

    @classmethod
    def select_sources(cls, source_names: List[str]) -> List[NewsSourceDescriptor]:
        """
        Resolve source names to descriptors, keeping the configured order.
        """
        unknown = [name for name in source_names if name not in cls._sources]
        if unknown:
            available_sources = list(cls._sources.keys())
            raise ValueError(f"Unknown news source(s) {unknown}. Available sources: {available_sources}")

        selected = [source for source in cls._sources.values() if source.name in source_names]
        cls.logger.debug(f"Selected news sources: {[source.name for source in selected]}")
        return selected
