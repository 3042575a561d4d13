from __future__ import annotations

import re
import warnings
from typing import FrozenSet, Iterable

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

from .models import FeedItem, RawCategory, RawItem

_WS = re.compile(r"\s+")

# Short summaries that look like a URL or filename are still text
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)


def collapse_whitespace(text: str) -> str:
    return _WS.sub(" ", text or "").strip()


def strip_markup(fragment: str) -> str:
    """
    Render an HTML fragment to plain text: tags removed, entities decoded,
    whitespace collapsed. Plain text passes through unchanged.
    """
    if not fragment or not fragment.strip():
        return ""
    if "<" not in fragment and "&" not in fragment:
        return collapse_whitespace(fragment)
    soup = BeautifulSoup(fragment, "html.parser")
    return collapse_whitespace(soup.get_text())


def normalize_category(raw: RawCategory) -> str:
    # Prefer the structured term attribute (Atom) over inner text (RSS)
    term = collapse_whitespace(raw.term)
    return term or collapse_whitespace(raw.text)


def normalize_categories(raws: Iterable[RawCategory]) -> FrozenSet[str]:
    return frozenset(c for c in (normalize_category(r) for r in raws) if c)


def to_feed_item(raw: RawItem) -> FeedItem:
    """
    Convert raw entry fragments into a FeedItem.

    Title and link are taken as extracted text; description and content are
    re-parsed as HTML and reduced to their text. Missing fragments become
    empty strings, so this never raises for odd input.
    """
    link = collapse_whitespace(raw.link_text) or collapse_whitespace(raw.link_href)
    return FeedItem(
        title=collapse_whitespace(raw.title),
        link=link,
        description=strip_markup(raw.description),
        content=strip_markup(raw.content),
        categories=normalize_categories(raw.categories),
    )
