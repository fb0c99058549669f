import io
import re
from typing import List, Optional

import feedparser
from bs4 import BeautifulSoup, Tag
from feedparser.exceptions import CharacterEncodingOverride, NonXMLContentType

from azinews.news.errors import ParseError
from azinews.news.model import NewsItem
from azinews.logging_config import create_logger


MAX_ENTRIES_PER_FEED = 10
DESCRIPTION_MAX_LENGTH = 150
ELLIPSIS = "..."

ENTRY_TAG = "item"

# Bozo reasons that still leave a strictly parsed document behind
BENIGN_BOZO_EXCEPTIONS = (
    CharacterEncodingOverride,
    NonXMLContentType,
)

TAG_PATTERN = re.compile(r'<.*?>', re.DOTALL)

logger = create_logger("FeedExtractor")


def clean_description(description: str) -> str:
    """Strip markup tags and the handled HTML entities from a feed description.

    Tags are stripped before entities are decoded, so escaped markup such as
    `&amp;lt;b&amp;gt;` survives as text.
    """
    cleaned = TAG_PATTERN.sub('', description)
    cleaned = cleaned.replace('&nbsp;', ' ')
    cleaned = cleaned.replace('&amp;', '&')
    cleaned = cleaned.replace('&quot;', '"')
    return cleaned.strip()


def truncate_description(description: str) -> str:
    """Cut the description to DESCRIPTION_MAX_LENGTH characters plus an ellipsis, mid-word if need be."""
    if len(description) > DESCRIPTION_MAX_LENGTH:
        return f"{description[:DESCRIPTION_MAX_LENGTH]}{ELLIPSIS}"
    return description


def parse_feed(raw_markup: bytes, source_name: str) -> BeautifulSoup:
    """
    Parse raw feed bytes into a document tree.

    feedparser checks that the markup is well-formed; the entries are then read
    from a BeautifulSoup tree, which keeps element text exactly as written instead
    of feedparser's normalized fields (stripped titles, link taken from guid,
    summary taken from content:encoded).

    Raises:
        ParseError: If raw_markup is not a well-formed document
    """
    # A byte stream keeps feedparser from treating the payload as a path or URL
    feed = feedparser.parse(io.BytesIO(raw_markup), sanitize_html=False, resolve_relative_uris=False)

    if feed.bozo:
        bozo_exception = feed.get('bozo_exception')
        if not isinstance(bozo_exception, BENIGN_BOZO_EXCEPTIONS):
            raise ParseError(source_name, f"Malformed feed markup: {bozo_exception}")
        logger.debug(f"Ignoring benign feed warning for {source_name}: {bozo_exception}")

    # Whitespace-only text inside an entry is content, e.g. a title of spaces
    return BeautifulSoup(raw_markup, "xml", preserve_whitespace_tags={ENTRY_TAG})


def qualified_name(element: Tag) -> str:
    return f"{element.prefix}:{element.name}" if element.prefix else element.name


def find_element(parent: Tag, name: str) -> Optional[Tag]:
    """First element at any depth under parent whose qualified name is exactly name."""
    return parent.find(lambda element: qualified_name(element) == name)


def find_field(entry: Tag, name: str) -> Optional[str]:
    """Return the untransformed text of the entry's name element, or None when it is absent."""
    element = find_element(entry, name)
    if element is None:
        return None
    return element.get_text()


def find_image_url(entry: Tag) -> Optional[str]:
    """Resolve the entry image: media content first, then an image enclosure."""
    media_content = find_element(entry, 'media:content')
    if media_content is not None:
        image_url = media_content.get('url')
        if image_url:
            return image_url

    enclosure = find_element(entry, 'enclosure')
    if enclosure is not None and enclosure.get('type', '').startswith('image'):
        return enclosure.get('url')

    return None


def extract_news_items(raw_markup: bytes, source_name: str) -> List[NewsItem]:
    """
    Extract normalized news items from one source's feed.

    Args:
        raw_markup: Response body of the feed endpoint
        source_name: Name of the source, stored on every item

    Returns:
        Up to MAX_ENTRIES_PER_FEED items in document order

    Raises:
        ParseError: If raw_markup is not a well-formed feed document
    """
    document = parse_feed(raw_markup, source_name)
    entries = document.find_all(
        lambda element: qualified_name(element) == ENTRY_TAG,
        limit=MAX_ENTRIES_PER_FEED,
    )

    news_items = []
    for entry in entries:
        title = find_field(entry, 'title')
        if not title:
            logger.debug(f"Skipping untitled entry from {source_name}")
            continue

        description = find_field(entry, 'description')
        link = find_field(entry, 'link')

        news_items.append(NewsItem(
            title=title,
            description=truncate_description(clean_description(description or '')),
            link=link or '',
            source=source_name,
            image_url=find_image_url(entry),
        ))

    return news_items


__all__ = [
    "MAX_ENTRIES_PER_FEED",
    "DESCRIPTION_MAX_LENGTH",
    "clean_description",
    "truncate_description",
    "parse_feed",
    "extract_news_items",
]
