from __future__ import annotations

from typing import Optional


class NewslyError(Exception):
    """
    Base class for errors raised by newsly.

    Every error names the feed source it belongs to (None when raised
    outside an aggregation) and a short cause.
    """

    def __init__(self, source: Optional[str], cause: str) -> None:
        super().__init__(self.describe(source, cause))
        self.source = source
        self.cause = cause

    @staticmethod
    def describe(source: Optional[str], cause: str) -> str:
        return f"Feed source failed: {source} ({cause})"


class FetchError(NewslyError):
    """Raised when a feed source cannot be retrieved over HTTP."""

    @staticmethod
    def describe(source: Optional[str], cause: str) -> str:
        return f"Failed to fetch feed: {source} ({cause})"


class ParseError(NewslyError):
    """Raised when a fetched body cannot be read as markup at all."""

    @staticmethod
    def describe(source: Optional[str], cause: str) -> str:
        where = f": {source}" if source else ""
        return f"Unreadable feed document{where} ({cause})"
