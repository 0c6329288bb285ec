"""
Link extractor for parsing rendered HTML and finding pages to crawl.

Uses BeautifulSoup for HTML parsing to find same-host navigation links
and the page title.
"""

from typing import Dict, List, Union
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from ..utils.constants import (
    ASSET_EXTENSIONS,
    ASSET_PATH_MARKERS,
    DEFAULT_NAME,
    SKIPPED_HREF_PREFIXES,
)
from ..utils.log import get_logger
from ..utils.paths import normalize_url, get_hostname, is_same_host


def parse_html(html: str) -> BeautifulSoup:
    """
    Parse an HTML document.

    Args:
        html: HTML content to parse

    Returns:
        Parsed document
    """
    return BeautifulSoup(html, 'lxml')


def get_page_title(soup: BeautifulSoup) -> str:
    """
    Pick the most relevant title for a page.

    Tries the first <h1>, then <title>, then the Open Graph title.

    Args:
        soup: Parsed document

    Returns:
        Title text, or "index" when the page has none
    """
    h1 = soup.find('h1')
    if h1:
        text = h1.get_text().strip()
        if text:
            return text

    if soup.title:
        text = soup.title.get_text().strip()
        if text:
            return text

    meta = soup.find('meta', attrs={'property': 'og:title'})
    if meta:
        content = (meta.get('content') or '').strip()
        if content:
            return content

    return DEFAULT_NAME


class LinkExtractor:
    """
    Extracts same-host page links from HTML content.

    Skips fragments, non-HTTP schemes, static assets and links to
    other hosts.
    """

    ASSET_SUFFIXES = tuple(f".{ext}" for ext in ASSET_EXTENSIONS)

    def __init__(self):
        self.logger = get_logger("links")

    def extract_links(
        self,
        html: Union[str, BeautifulSoup],
        base_url: str
    ) -> List[str]:
        """
        Extract crawlable links from a page.

        Args:
            html: HTML content or an already parsed document
            base_url: URL of the page (for resolving relative URLs)

        Returns:
            Absolute same-host URLs in document order, without duplicates
        """
        soup = parse_html(html) if isinstance(html, str) else html

        # dict keeps insertion order
        links: Dict[str, None] = {}

        for anchor in soup.find_all('a', href=True):
            href = anchor.get('href', '').strip()

            if not href:
                continue

            # Skip non-navigational links
            if href.startswith(SKIPPED_HREF_PREFIXES):
                continue

            try:
                if self._is_asset(href):
                    continue
                full_url = normalize_url(href, base_url)
            except ValueError as e:
                self.logger.warning(f"Error processing URL {href}: {e}")
                continue

            if not full_url:
                continue

            if not get_hostname(full_url):
                self.logger.warning(f"Could not resolve URL {href}: no host in {full_url}")
                continue

            if not is_same_host(full_url, base_url):
                continue

            links[full_url] = None

        return list(links)

    def _is_asset(self, href: str) -> bool:
        """
        Check if a link points at a static asset rather than a page.

        Args:
            href: Raw href attribute value

        Returns:
            True for images, stylesheets, scripts, fonts and build output
        """
        if any(marker in href for marker in ASSET_PATH_MARKERS):
            return True
        path = urlparse(href).path.lower()
        return path.endswith(self.ASSET_SUFFIXES)
