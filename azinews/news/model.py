from dataclasses import dataclass
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class NewsItem:
    """A single display-ready news entry extracted from a source feed."""
    title: str
    description: str  # HTML stripped, truncated to DESCRIPTION_MAX_LENGTH + ellipsis
    link: str
    source: str  # Name of the source descriptor the item was fetched from
    image_url: Optional[str] = None


class NewsSourceDescriptor(BaseModel):
    """A named RSS endpoint contributing entries to the aggregate."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Identifier of the news source, copied onto every item it yields")
    endpoint: str = Field(description="URL of the RSS feed")
    description: str = Field(default="", description="Human readable description of the source")
