from typing import Optional


class FeedError(Exception):
    """Base error for a single source failing to produce news items."""

    def __init__(self, source_name: str, message: str):
        super().__init__(f"{source_name}: {message}")
        self.source_name = source_name
        self.message = message


class FetchError(FeedError):
    """The feed could not be downloaded (network failure, timeout or non-2xx status)."""

    def __init__(self, source_name: str, message: str, status: Optional[int] = None):
        super().__init__(source_name, message)
        self.status = status


class ParseError(FeedError):
    """The downloaded feed is not well-formed markup."""
    pass
