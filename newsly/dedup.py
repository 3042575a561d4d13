from __future__ import annotations

from typing import Iterable, List, Optional, Set, Tuple

from .models import FeedItem

_Identity = Tuple[str, str]


def _identity(item: FeedItem) -> Optional[_Identity]:
    # Feeds that omit <link> still repeat the same headline across sources
    if item.link:
        return ("link", item.link)
    if item.title:
        return ("title", item.title)
    return None


def deduplicate(items: Iterable[FeedItem]) -> List[FeedItem]:
    """
    Drop items whose article was already seen earlier in the sequence.

    An article is identified by its link, or by its title when the entry
    has no link. Entries with neither are never merged.
    """
    seen: Set[_Identity] = set()
    kept: List[FeedItem] = []
    for item in items:
        ident = _identity(item)
        if ident is not None:
            if ident in seen:
                continue
            seen.add(ident)
        kept.append(item)
    return kept
