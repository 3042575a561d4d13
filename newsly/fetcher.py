from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlparse

import requests

from .exceptions import FetchError

logger = logging.getLogger(__name__)

# Some publishers reject bare HTTP client identifiers
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_TIMEOUT = 15.0

_ACCEPT = "application/rss+xml, application/atom+xml, application/xml;q=0.9, text/xml;q=0.9, */*;q=0.8"


def _check_url(url: str) -> None:
    parsed = urlparse(url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise FetchError(url, "not an absolute http(s) URL")


def fetch_document(
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
    session: Optional[requests.Session] = None,
) -> bytes:
    """
    Fetch a single feed URL and return the raw response body.

    Redirects are followed. Raises FetchError on transport errors, timeouts
    and non-2xx responses.
    """
    _check_url(url)
    headers = {"User-Agent": user_agent, "Accept": _ACCEPT}
    get = session.get if session is not None else requests.get

    logger.debug("Fetching feed: %s", url)
    try:
        response = get(url, headers=headers, timeout=timeout, allow_redirects=True)
        response.raise_for_status()
    except requests.Timeout as e:
        raise FetchError(url, f"timed out after {timeout}s") from e
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        raise FetchError(url, f"HTTP {status}") from e
    except requests.RequestException as e:
        raise FetchError(url, str(e) or type(e).__name__) from e

    if response.history:
        logger.debug("Followed %d redirect(s): %s -> %s", len(response.history), url, response.url)
    return response.content
