from pathlib import Path
from typing import List, Optional
from xml.sax.saxutils import escape, quoteattr

import pytest


DATASETS_DIR = Path(__file__).parent / "datasets"


def rss_item(
    title: Optional[str] = None,
    description: Optional[str] = None,
    link: Optional[str] = None,
    media_url: Optional[str] = None,
    enclosure: Optional[tuple] = None,
    guid: Optional[str] = None,
    content_encoded: Optional[str] = None,
) -> str:
    """Render one <item>; None leaves the element out entirely. enclosure is (url, type)."""
    parts = ["<item>"]
    if title is not None:
        parts.append(f"<title>{escape(title)}</title>")
    if description is not None:
        parts.append(f"<description>{escape(description)}</description>")
    if link is not None:
        parts.append(f"<link>{escape(link)}</link>")
    if media_url is not None:
        parts.append(f"<media:content url={quoteattr(media_url)} medium=\"image\" />")
    if enclosure is not None:
        url, mime_type = enclosure
        parts.append(f"<enclosure url={quoteattr(url)} type={quoteattr(mime_type)} length=\"0\" />")
    if guid is not None:
        parts.append(f"<guid>{escape(guid)}</guid>")
    if content_encoded is not None:
        parts.append(f"<content:encoded>{escape(content_encoded)}</content:encoded>")
    parts.append("</item>")
    return "".join(parts)


def build_rss_feed(items: List[str], title: str = "Test Feed") -> bytes:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0" xmlns:media="http://search.yahoo.com/mrss/"'
        ' xmlns:content="http://purl.org/rss/1.0/modules/content/">'
        f'<channel><title>{escape(title)}</title><link>https://example.com</link>'
        f'<description>Test feed</description>{"".join(items)}</channel></rss>'
    ).encode("utf-8")


@pytest.fixture
def digi24_feed() -> bytes:
    return (DATASETS_DIR / "digi24_sample.xml").read_bytes()
