"""Logging configuration for the newsly command line."""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Configure root logging for command-line runs.

    Library modules only create loggers; handlers are installed here.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Items go to stdout, diagnostics to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # urllib3 is chatty at DEBUG
    logging.getLogger("urllib3").setLevel(max(log_level, logging.INFO))
