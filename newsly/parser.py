from __future__ import annotations

import logging
import re
from html.entities import html5
from typing import List, Optional, Sequence, Union

from bs4 import BeautifulSoup, Tag

from .exceptions import ParseError
from .models import RawCategory, RawItem

logger = logging.getLogger(__name__)

ENTRY_TAGS = ("item", "entry")
DESCRIPTION_TAGS = ("description", "summary")
CONTENT_TAGS = ("content", "content:encoded")

XML_ENTITIES = frozenset({"amp", "lt", "gt", "quot", "apos"})
_NAMED_ENTITY = re.compile(r"&([A-Za-z][A-Za-z0-9]*);")
_NAMED_ENTITY_BYTES = re.compile(rb"&([A-Za-z][A-Za-z0-9]*);")


def _numeric_ref(name: str) -> Optional[str]:
    if name in XML_ENTITIES:
        return None
    chars = html5.get(name + ";")
    if chars is None:
        return None
    return "".join(f"&#{ord(c)};" for c in chars)


def replace_html_entities(body: Union[bytes, str]) -> Union[bytes, str]:
    """
    Rewrite HTML named entities (&eacute;, &nbsp;, ...) as numeric references.

    XML only defines five named entities; lxml in recovery mode drops the
    rest, sometimes with a neighbouring &amp;. Unknown names are left alone.
    """
    if isinstance(body, bytes):
        def sub_bytes(m: "re.Match[bytes]") -> bytes:
            ref = _numeric_ref(m.group(1).decode("ascii"))
            return ref.encode("ascii") if ref else m.group(0)

        return _NAMED_ENTITY_BYTES.sub(sub_bytes, body)

    def sub_text(m: "re.Match[str]") -> str:
        return _numeric_ref(m.group(1)) or m.group(0)

    return _NAMED_ENTITY.sub(sub_text, body)


def _qname(tag: Tag) -> str:
    # lxml-xml keeps the namespace prefix apart from the local name
    if tag.prefix and ":" not in tag.name:
        return f"{tag.prefix}:{tag.name}"
    return tag.name


def _attr(tag: Tag, name: str) -> str:
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value or ""


def _lookup(node: Tag, names: Sequence[str]) -> Optional[Tag]:
    """
    Find a sub-field of an entry node.

    Direct children win over deeper descendants; within each level the
    first name in `names` that matches wins.
    """
    for recursive in (False, True):
        candidates = node.find_all(True, recursive=recursive)
        for name in names:
            for tag in candidates:
                if _qname(tag) == name:
                    return tag
    return None


def _text(tag: Optional[Tag]) -> str:
    return tag.get_text() if tag is not None else ""


def _pick_link(node: Tag) -> Optional[Tag]:
    links = [t for t in node.find_all(True, recursive=False) if _qname(t) == "link"]
    if not links:
        links = [t for t in node.find_all(True) if _qname(t) == "link"]
    for link in links:
        if _attr(link, "rel") in ("", "alternate"):
            return link
    return links[0] if links else None


def parse_entry(node: Tag) -> RawItem:
    """
    Pull the raw fragments out of a single <item> or <entry> node.
    """
    link = _pick_link(node)
    categories = tuple(
        RawCategory(term=_attr(tag, "term"), text=tag.get_text())
        for tag in node.find_all(True)
        if _qname(tag) == "category"
    )
    return RawItem(
        title=_text(_lookup(node, ("title",))),
        link_text=_text(link),
        link_href=_attr(link, "href") if link is not None else "",
        description=_text(_lookup(node, DESCRIPTION_TAGS)),
        content=_text(_lookup(node, CONTENT_TAGS)),
        categories=categories,
    )


def parse_document(body: Union[bytes, str], source: Optional[str] = None) -> List[RawItem]:
    """
    Parse an RSS or Atom document into raw entries, in document order.

    The XML builder runs in recovery mode, so malformed feeds still yield
    whatever entries can be found. A document without entries is an empty
    list. Raises ParseError only when the body cannot be read as markup.
    """
    if not body or not body.strip():
        raise ParseError(source, "empty document")

    try:
        soup = BeautifulSoup(replace_html_entities(body), "xml")
    except Exception as e:  # pragma: no cover - surface as domain error
        raise ParseError(source, str(e) or type(e).__name__) from e

    if soup.find() is None:
        raise ParseError(source, "no markup elements found")

    nodes = soup.find_all(lambda t: _qname(t) in ENTRY_TAGS)
    items = [parse_entry(node) for node in nodes]
    logger.debug("Parsed %d entries%s", len(items), f" from {source}" if source else "")
    return items
