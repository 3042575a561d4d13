from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .models import FeedItem


def filter_by_category(items: Sequence[FeedItem], selector: Optional[str] = None) -> List[FeedItem]:
    """
    Return the items whose categories contain `selector`, in their original order.

    Matching is exact and case-sensitive. With no selector every item is
    returned; a selector nothing carries gives an empty list.
    """
    if selector is None:
        return list(items)
    return [it for it in items if selector in it.categories]


def available_categories(items: Iterable[FeedItem]) -> List[str]:
    """Distinct category labels across `items`, sorted for display."""
    labels = set()
    for it in items:
        labels.update(it.categories)
    return sorted(labels)
