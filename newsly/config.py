from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

from .fetcher import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

DEFAULT_FEEDS: Tuple[str, ...] = (
    "https://www.theverge.com/rss/index.xml",
    "https://feeds.bbci.co.uk/news/rss.xml",
)
DEFAULT_MAX_WORKERS = 8

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _split_feeds(value: str) -> Tuple[str, ...]:
    # Commas may appear inside query strings, so only a trailing one is a separator
    return tuple(u for u in (tok.rstrip(",") for tok in value.split()) if u)


def _float(env: Mapping[str, str], name: str, default: Optional[float]) -> Optional[float]:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {raw!r}")
    return value


def _bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration for an aggregation run.

    Environment variables (a `.env` file in the working directory is loaded first):
    - NEWSLY_FEEDS: feed URLs separated by whitespace (a trailing comma is allowed)
    - NEWSLY_TIMEOUT: per-request timeout in seconds
    - NEWSLY_TOTAL_TIMEOUT: deadline for a whole run in seconds (unset = wait for all)
    - NEWSLY_MAX_WORKERS: upper bound on concurrent fetches
    - NEWSLY_USER_AGENT: client identity sent to feed hosts
    - NEWSLY_DEDUPLICATE: drop repeated links across sources
    - NEWSLY_LOG_LEVEL: DEBUG, INFO, WARNING, ...
    """
    feeds: Tuple[str, ...] = DEFAULT_FEEDS
    timeout: float = DEFAULT_TIMEOUT
    total_timeout: Optional[float] = None
    max_workers: int = DEFAULT_MAX_WORKERS
    user_agent: str = DEFAULT_USER_AGENT
    deduplicate: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, *, dotenv: bool = True) -> "Settings":
        if env is None:
            if dotenv:
                load_dotenv()
            env = os.environ

        feeds = _split_feeds(env.get("NEWSLY_FEEDS", "")) or DEFAULT_FEEDS
        return cls(
            feeds=feeds,
            timeout=_float(env, "NEWSLY_TIMEOUT", DEFAULT_TIMEOUT),
            total_timeout=_float(env, "NEWSLY_TOTAL_TIMEOUT", None),
            max_workers=_int(env, "NEWSLY_MAX_WORKERS", DEFAULT_MAX_WORKERS),
            user_agent=(env.get("NEWSLY_USER_AGENT") or "").strip() or DEFAULT_USER_AGENT,
            deduplicate=_bool(env, "NEWSLY_DEDUPLICATE", False),
            log_level=(env.get("NEWSLY_LOG_LEVEL") or "INFO").strip().upper(),
        )
