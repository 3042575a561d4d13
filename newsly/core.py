from __future__ import annotations

import concurrent.futures as _fut
import logging
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional, Sequence

import requests

from .dedup import deduplicate
from .exceptions import FetchError, NewslyError, ParseError
from .fetcher import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, fetch_document
from .models import AggregationResult, FeedItem, SourceOutcome
from .normalizer import to_feed_item
from .parser import parse_document

if TYPE_CHECKING:
    from .config import Settings

logger = logging.getLogger(__name__)

Fetch = Callable[[str], bytes]


class FeedAggregator:
    """
    High-level API: fetch RSS/Atom feeds and return normalized FeedItems.

    Pipeline per source: fetch -> parse -> normalize. Sources run concurrently,
    a failing source contributes no items, and the combined sequence always
    follows source order.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        max_workers: int = 8,
        total_timeout: Optional[float] = None,
        deduplicate: bool = False,
        session: Optional[requests.Session] = None,
        fetch: Optional[Fetch] = None,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.timeout = timeout
        self.user_agent = user_agent
        self.max_workers = max_workers
        self.total_timeout = total_timeout
        self.deduplicate = deduplicate
        self._session = session
        self._fetch = fetch or self._http_fetch

    @classmethod
    def from_settings(cls, settings: "Settings", **kwargs) -> "FeedAggregator":
        return cls(
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            max_workers=settings.max_workers,
            total_timeout=settings.total_timeout,
            deduplicate=settings.deduplicate,
            **kwargs,
        )

    def _http_fetch(self, url: str) -> bytes:
        return fetch_document(
            url,
            timeout=self.timeout,
            user_agent=self.user_agent,
            session=self._session,
        )

    def process_source(self, url: str) -> SourceOutcome:
        """
        Run one source through fetch -> parse -> normalize.

        Fetch and parse errors are returned on the outcome rather than raised.
        """
        try:
            body = self._fetch(url)
            raw_items = parse_document(body, source=url)
        except (FetchError, ParseError) as e:
            return SourceOutcome(source=url, error=e)
        return SourceOutcome(source=url, items=tuple(to_feed_item(r) for r in raw_items))

    def _run(self, urls: List[str]) -> List[SourceOutcome]:
        slots: List[Optional[SourceOutcome]] = [None] * len(urls)
        pool = _fut.ThreadPoolExecutor(
            max_workers=min(len(urls), self.max_workers),
            thread_name_prefix="newsly-fetch",
        )
        try:
            futs = {pool.submit(self.process_source, u): i for i, u in enumerate(urls)}
            done, pending = _fut.wait(futs, timeout=self.total_timeout)
            for f in done:
                i = futs[f]
                try:
                    slots[i] = f.result()
                except Exception as e:
                    # Unexpected errors are still confined to their own source
                    logger.exception("Unexpected error processing %s", urls[i])
                    slots[i] = SourceOutcome(source=urls[i], error=NewslyError(urls[i], f"unexpected error: {e!r}"))
            for f in pending:
                i = futs[f]
                f.cancel()
                slots[i] = SourceOutcome(
                    source=urls[i],
                    error=FetchError(urls[i], f"not finished within {self.total_timeout}s"),
                )
        finally:
            # Do not join threads still stuck past the deadline
            pool.shutdown(wait=self.total_timeout is None, cancel_futures=True)
        return [s for s in slots if s is not None]

    def aggregate(self, sources: Iterable[str]) -> AggregationResult:
        urls = list(sources)
        if not urls:
            return AggregationResult()

        outcomes = self._run(urls)
        items: List[FeedItem] = []
        for outcome in outcomes:
            if outcome.ok:
                logger.info("Fetched %d items from %s", outcome.count, outcome.source)
                items.extend(outcome.items)
            else:
                logger.warning("Skipping feed %s: %s", outcome.source, outcome.error.cause)

        if self.deduplicate:
            before = len(items)
            items = deduplicate(items)
            if before != len(items):
                logger.debug("Removed %d duplicate items", before - len(items))

        failed = sum(1 for o in outcomes if not o.ok)
        if failed == len(outcomes):
            logger.warning("All %d feed sources failed", failed)
        return AggregationResult(items=tuple(items), outcomes=tuple(outcomes))

    def fetch(self, sources: Iterable[str]) -> List[FeedItem]:
        return list(self.aggregate(sources).items)


def aggregate(sources: Sequence[str], **options) -> List[FeedItem]:
    """
    Fetch every source and return the combined items in source order.

    Keyword options are passed to FeedAggregator. Never raises for a failing
    source; a run where everything fails returns an empty list.
    """
    return FeedAggregator(**options).fetch(sources)
