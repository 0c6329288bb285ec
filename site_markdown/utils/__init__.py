"""
Utility modules for the site crawler.

Contains logging, URL and path handling utilities, and constants.
"""

from .log import setup_logger, configure_logging, get_logger
from .paths import (
    OutputLocation,
    normalize_url,
    is_same_host,
    slugify,
    page_output_location,
    aggregate_filename,
    ensure_dir,
)
from .constants import (
    DEFAULT_USER_AGENT,
    DEFAULT_PAGE_TIMEOUT,
    DEFAULT_SETTLE_DELAY,
    DEFAULT_CONCURRENCY,
    DEFAULT_MAX_DEPTH,
    DEFAULT_OUTPUT_DIR,
)

__all__ = [
    "setup_logger",
    "configure_logging",
    "get_logger",
    "OutputLocation",
    "normalize_url",
    "is_same_host",
    "slugify",
    "page_output_location",
    "aggregate_filename",
    "ensure_dir",
    "DEFAULT_USER_AGENT",
    "DEFAULT_PAGE_TIMEOUT",
    "DEFAULT_SETTLE_DELAY",
    "DEFAULT_CONCURRENCY",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_OUTPUT_DIR",
]
