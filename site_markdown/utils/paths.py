"""
Path and URL utilities for the site crawler.

Provides URL normalization, output naming, and directory management.
"""

import os
import re
from typing import NamedTuple, Optional
from urllib.parse import urlparse, urlunparse, urljoin, unquote

from .constants import (
    DEFAULT_NAME,
    DEFAULT_AGGREGATE_NAME,
    MAX_SLUG_LENGTH,
    SKIPPED_HREF_PREFIXES,
)


_NON_ALNUM = re.compile(r'[^a-z0-9]+')


class OutputLocation(NamedTuple):
    """Folder and file name for one crawled page."""

    folder: str
    filename: str


def normalize_url(url: str, base_url: Optional[str] = None) -> str:
    """
    Resolve a URL against a base URL and remove its fragment.

    Absolute URLs are kept, protocol-relative URLs take the base URL's
    scheme, root-relative URLs take the base URL's origin, and anything
    else is joined with the base URL.

    Args:
        url: URL or href to normalize
        base_url: Base URL for resolving relative URLs

    Returns:
        Normalized URL string, or "" for empty and non-navigational input

    Raises:
        ValueError: If the URL cannot be parsed
    """
    if not url:
        return ""

    url = url.strip()
    if not url or url.startswith(SKIPPED_HREF_PREFIXES):
        return ""

    if url.startswith('http'):
        absolute = url
    elif url.startswith('//'):
        scheme = urlparse(base_url).scheme if base_url else 'https'
        absolute = f"{scheme}:{url}"
    elif url.startswith('/') and base_url:
        parsed_base = urlparse(base_url)
        absolute = f"{parsed_base.scheme}://{parsed_base.netloc}{url}"
    elif base_url:
        absolute = urljoin(base_url, url)
    else:
        absolute = url

    parsed = urlparse(absolute)

    return urlunparse((
        parsed.scheme.lower(),
        parsed.netloc.lower(),
        parsed.path or '/',
        parsed.params,
        parsed.query,
        ''  # Remove fragment
    ))


def get_hostname(url: str) -> str:
    """
    Extract the hostname from a URL.

    Args:
        url: URL to extract the hostname from

    Returns:
        Lowercase hostname without port, or "" if there is none
    """
    return urlparse(url).hostname or ""


def is_same_host(url: str, base_url: str) -> bool:
    """
    Check if a URL has exactly the same hostname as the base URL.

    Subdomains and ``www.`` variants count as different hosts.

    Args:
        url: URL to check
        base_url: Base URL for comparison

    Returns:
        True if same hostname, False otherwise
    """
    hostname = get_hostname(url)
    return bool(hostname) and hostname == get_hostname(base_url)


def slugify(text: str, max_length: int = MAX_SLUG_LENGTH) -> str:
    """
    Turn text into a lowercase, dash-separated token safe for file names.

    Args:
        text: Text to convert
        max_length: Maximum slug length

    Returns:
        Slug string, possibly empty
    """
    slug = _NON_ALNUM.sub('-', (text or '').lower()).strip('-')
    return slug[:max_length].rstrip('-')


def _strip_www(hostname: str) -> str:
    if hostname.startswith('www.'):
        return hostname[4:]
    return hostname


def _path_segments(url: str) -> list:
    path = unquote(urlparse(url).path)
    return [segment for segment in path.split('/') if segment]


def page_output_location(url: str, title: Optional[str]) -> OutputLocation:
    """
    Derive the folder and file name for a page from its URL and title.

    The folder is the slugified hostname. The file name is the slugified
    title; when the title is missing or reduces to "index" on a non-root
    path, the path segments are used instead.

    Args:
        url: Page URL
        title: Extracted page title

    Returns:
        OutputLocation with a non-empty folder and a ``.md`` file name
    """
    folder = slugify(_strip_www(get_hostname(url))) or DEFAULT_NAME

    stem = slugify(title) if title else DEFAULT_NAME
    if stem in ('', DEFAULT_NAME):
        segments = _path_segments(url)
        if segments:
            stem = slugify('-'.join(segments))

    return OutputLocation(folder, f"{stem or DEFAULT_NAME}.md")


def aggregate_filename(url: str) -> str:
    """
    Derive a flat file name for a whole crawl from the start URL.

    Uses the hostname without ``www.`` and its top-level domain, followed by
    the first path segment when there is one.

    Args:
        url: Start URL of the crawl

    Returns:
        Non-empty ``.md`` file name
    """
    labels = _strip_www(get_hostname(url)).split('.')
    if len(labels) > 1 and not labels[-1].isdigit():
        labels = labels[:-1]

    parts = ['-'.join(labels)]
    segments = _path_segments(url)
    if segments:
        parts.append(segments[0])

    return f"{slugify('-'.join(parts)) or DEFAULT_AGGREGATE_NAME}.md"


def ensure_dir(path: str) -> None:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists
    """
    os.makedirs(path, exist_ok=True)


def ensure_parent_dir(file_path: str) -> None:
    """
    Ensure the parent directory of a file exists.

    Args:
        file_path: File path whose parent directory should exist
    """
    parent = os.path.dirname(file_path)
    if parent:
        ensure_dir(parent)
