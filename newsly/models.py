from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

from .exceptions import NewslyError


@dataclass(frozen=True)
class FeedItem:
    """
    Stable public model representing one normalized feed entry.

    WARNING: Do not change fields lightly. This is the library's contract.
    """
    title: str
    link: str
    description: str
    content: str = ""
    categories: FrozenSet[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class RawCategory:
    term: str = ""
    text: str = ""


@dataclass(frozen=True)
class RawItem:
    """
    Unprocessed fragments of a single <item>/<entry>, as found by the parser.
    """
    title: str = ""
    link_text: str = ""
    link_href: str = ""
    description: str = ""
    content: str = ""
    categories: Tuple[RawCategory, ...] = ()


@dataclass(frozen=True)
class SourceOutcome:
    """Result of one source pipeline: items on success, the error otherwise."""
    source: str
    items: Tuple[FeedItem, ...] = ()
    error: Optional[NewslyError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def count(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class AggregationResult:
    items: Tuple[FeedItem, ...] = ()
    outcomes: Tuple[SourceOutcome, ...] = ()

    @property
    def failures(self) -> List[SourceOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def all_failed(self) -> bool:
        return bool(self.outcomes) and all(not o.ok for o in self.outcomes)

    @property
    def categories(self) -> List[str]:
        from .filters import available_categories

        return available_categories(self.items)
