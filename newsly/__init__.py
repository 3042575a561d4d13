"""
newsly

Aggregates RSS/Atom feeds from several sources into one normalized, filterable
list of news items.

Core ideas:
- Input: an ordered list of RSS/Atom feed URLs
- Process: fetch (concurrently) → parse item/entry nodes → normalize text & categories
- Output: List[FeedItem], in source order; failing sources contribute nothing

Example
-------
from newsly import FeedAggregator, filter_by_category

aggregator = FeedAggregator(timeout=10)
result = aggregator.aggregate([
    "https://www.theverge.com/rss/index.xml",
    "https://feeds.bbci.co.uk/news/rss.xml",
])

for failed in result.failures:
    print("skipped", failed.source, failed.error)

for item in filter_by_category(result.items, "World"):
    print(item.title, item.link)
"""
from .models import AggregationResult, FeedItem, SourceOutcome
from .exceptions import FetchError, NewslyError, ParseError
from .core import FeedAggregator, aggregate
from .filters import available_categories, filter_by_category
from .config import Settings

__all__ = [
    "AggregationResult",
    "FeedAggregator",
    "FeedItem",
    "FetchError",
    "NewslyError",
    "ParseError",
    "Settings",
    "SourceOutcome",
    "aggregate",
    "available_categories",
    "filter_by_category",
]
