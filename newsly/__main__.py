"""Command line: run one aggregation pass and print the items."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import List, Optional, TextIO

from .config import Settings
from .core import FeedAggregator
from .filters import filter_by_category
from .logging_config import setup_logging
from .models import AggregationResult, FeedItem


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="newsly",
        description="Aggregate RSS/Atom feeds and print the combined items.",
    )
    parser.add_argument("urls", nargs="*", help="Feed URLs (default: NEWSLY_FEEDS or built-in list)")
    parser.add_argument("-c", "--category", help="Only show items carrying this category (exact match)")
    parser.add_argument("--list-categories", action="store_true", help="Print the distinct categories and exit")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    parser.add_argument("--dedup", action="store_true", help="Drop items repeating an earlier link")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    return parser


def format_item(item: FeedItem) -> str:
    cats = ",".join(sorted(item.categories))
    prefix = f"[{cats}] " if cats else ""
    return f"{prefix}{item.title} - {item.link}"


def render(result: AggregationResult, args: argparse.Namespace, out: TextIO, err: TextIO) -> None:
    if args.list_categories:
        for name in result.categories:
            print(name, file=out)
        return

    for item in filter_by_category(result.items, args.category):
        print(format_item(item), file=out)

    for outcome in result.outcomes:
        status = f"{outcome.count} items" if outcome.ok else f"failed: {outcome.error.cause}"
        print(f"{outcome.source}: {status}", file=err)


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings.from_env()
    except ValueError as e:
        parser.error(str(e))
    if args.urls:
        settings = replace(settings, feeds=tuple(args.urls))
    if args.timeout is not None:
        settings = replace(settings, timeout=args.timeout)
    if args.dedup:
        settings = replace(settings, deduplicate=True)
    if args.log_level:
        settings = replace(settings, log_level=args.log_level.upper())

    setup_logging(settings.log_level)
    result = FeedAggregator.from_settings(settings).aggregate(settings.feeds)
    render(result, args, sys.stdout, sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
