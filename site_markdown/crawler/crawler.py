"""
Main site crawler module.

Orchestrates the crawling process: renders each page once, converts it to
Markdown, saves it, and fans out into the links found on the start page.
"""

import asyncio
import os
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set

from .errors import OutputError
from .extractor import LinkExtractor, get_page_title, parse_html
from .markdown import MarkdownConverter
from .renderer import PageRenderer, Renderer
from .writer import ExtractedPage, OutputMode, create_writer
from ..utils.constants import (
    DEFAULT_CONCURRENCY,
    DEFAULT_MAX_DEPTH,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PAGE_TIMEOUT,
    DEFAULT_SETTLE_DELAY,
)
from ..utils.log import get_logger
from ..utils.paths import normalize_url, get_hostname


class PageState(Enum):
    """Progress of one URL within a crawl."""

    VISITING = "visiting"
    DONE = "done"


@dataclass
class CrawlError:
    """A page that failed during the crawl."""

    url: str
    type: str
    message: str


@dataclass
class CrawlResult:
    """Results of the crawling operation."""

    pages_crawled: int = 0
    pages_saved: int = 0
    files: List[str] = field(default_factory=list)
    errors: List[CrawlError] = field(default_factory=list)
    discovered: List[str] = field(default_factory=list)
    duration_seconds: float = 0.0


class CrawlSession:
    """
    State shared by all pages of a single crawl.

    Owns the visited URLs, the output writer, the render semaphore and the
    collected errors. A new session is created for every crawl so
    independent crawls can run in the same process.
    """

    def __init__(self, writer=None, concurrency: int = DEFAULT_CONCURRENCY):
        self.writer = writer
        self.semaphore = asyncio.Semaphore(concurrency)
        self.errors: List[CrawlError] = []
        self.pages_saved = 0

        # URL -> state, in the order URLs were claimed
        self._states: Dict[str, PageState] = {}
        self._discovered: Dict[str, None] = {}

    def claim(self, url: str) -> bool:
        """
        Mark a URL as being visited if nobody has claimed it yet.

        There is no await between the check and the insert, so two tasks on
        the event loop can never both claim the same URL.

        Args:
            url: Normalized URL

        Returns:
            True if the caller should fetch the URL, False if it was seen before
        """
        if url in self._states:
            return False
        self._states[url] = PageState.VISITING
        return True

    def finish(self, url: str) -> None:
        self._states[url] = PageState.DONE

    def state(self, url: str) -> Optional[PageState]:
        return self._states.get(url)

    @property
    def visited(self) -> Set[str]:
        return set(self._states)

    @property
    def claimed(self) -> List[str]:
        return list(self._states)

    def add_discovered(self, urls: List[str]) -> None:
        for url in urls:
            self._discovered[url] = None

    @property
    def discovered(self) -> List[str]:
        return list(self._discovered)

    def record_error(self, url: str, error_type: str, message: str) -> None:
        self.errors.append(CrawlError(url=url, type=error_type, message=message))


class SiteCrawler:
    """
    Depth-bounded crawler for a single host.

    Crawls the start page, then every same-host page it links to, and
    writes each page as Markdown.
    """

    def __init__(
        self,
        url: str,
        output_dir: str = DEFAULT_OUTPUT_DIR,
        mode: OutputMode = OutputMode.PAGES,
        renderer: Optional[Renderer] = None,
        timeout: int = DEFAULT_PAGE_TIMEOUT,
        settle_delay: float = DEFAULT_SETTLE_DELAY,
        concurrency: int = DEFAULT_CONCURRENCY,
        max_depth: int = DEFAULT_MAX_DEPTH,
        headless: bool = True
    ):
        """
        Initialize the site crawler.

        Args:
            url: Starting URL to crawl
            output_dir: Directory to save Markdown files in
            mode: Output layout (one file per page or one file per crawl)
            renderer: Page renderer; a Playwright renderer is created if omitted
            timeout: Page load timeout in milliseconds
            settle_delay: Seconds to wait after load for client-rendered content
            concurrency: Maximum pages rendered at the same time
            max_depth: Link levels to follow from the start page
            headless: Run browser in headless mode

        Raises:
            ValueError: If the URL has no host or concurrency is below 1
        """
        self.start_url = normalize_url(url)
        if not get_hostname(self.start_url):
            raise ValueError(f"Invalid URL: {url}")

        if concurrency < 1:
            raise ValueError(f"Concurrency must be at least 1, got {concurrency}")

        self.output_dir = os.path.abspath(output_dir)
        self.mode = OutputMode(mode)
        self.concurrency = concurrency
        self.max_depth = max_depth

        self.logger = get_logger("crawler")

        # Initialize components
        self.renderer = renderer or PageRenderer(
            timeout=timeout,
            settle_delay=settle_delay,
            headless=headless
        )
        self.converter = MarkdownConverter()
        self.link_extractor = LinkExtractor()

    async def crawl(self) -> CrawlResult:
        """
        Crawl the start page and the pages it links to.

        Returns:
            CrawlResult with statistics and information
        """
        start_time = time.time()

        self.logger.info(f"Starting crawl of {self.start_url}")
        self.logger.info(f"Output directory: {self.output_dir} ({self.mode.value} mode)")

        writer = create_writer(self.mode, self.output_dir, self.start_url)
        session = CrawlSession(writer=writer, concurrency=self.concurrency)

        await self._crawl_url(session, self.start_url, 0)

        files: List[str] = []
        try:
            files = writer.close(order=session.claimed)
        except OutputError as e:
            self.logger.error(str(e))
            session.record_error(self.start_url, 'output_error', str(e))
            if self.mode is OutputMode.SINGLE:
                # pages were only buffered, nothing reached disk
                session.pages_saved = 0

        duration = time.time() - start_time

        result = CrawlResult(
            pages_crawled=len(session.visited),
            pages_saved=session.pages_saved,
            files=files,
            errors=session.errors,
            discovered=session.discovered,
            duration_seconds=duration
        )

        self.logger.info(
            f"Crawl complete! {result.pages_crawled} pages crawled, "
            f"{result.pages_saved} saved in {duration:.1f}s"
        )

        return result

    async def _crawl_url(self, session: CrawlSession, url: str, depth: int) -> None:
        """
        Crawl one URL and, above the depth limit, the links found on it.

        Args:
            session: Current crawl session
            url: Normalized URL to crawl
            depth: Link distance from the start page
        """
        if not session.claim(url):
            return

        links = await self._process_page(session, url, depth)

        if links:
            await asyncio.gather(
                *(self._crawl_url(session, link, depth + 1) for link in links)
            )

    async def _process_page(self, session: CrawlSession, url: str, depth: int) -> List[str]:
        """
        Render, convert and save a single page.

        Args:
            session: Current crawl session
            url: URL to process
            depth: Link distance from the start page

        Returns:
            Links to crawl next, empty at the depth limit or on failure
        """
        self.logger.info(f"Crawling: {url}")

        try:
            async with session.semaphore:
                html = await self.renderer.render(url)

            if not html:
                session.record_error(url, 'render_error', 'Failed to render page')
                return []

            soup = parse_html(html)
            page = ExtractedPage(
                url=url,
                title=get_page_title(soup),
                markdown=self.converter.convert_html(soup)
            )

            try:
                session.writer.write(page)
                session.pages_saved += 1
            except OutputError as e:
                self.logger.error(str(e))
                session.record_error(url, 'output_error', str(e))

            if depth >= self.max_depth:
                return []

            links = self.link_extractor.extract_links(soup, url)
            for link in links:
                self.logger.info(f"Found URL: {link}")
            session.add_discovered(links)
            return links

        except Exception as e:
            self.logger.error(f"Error crawling {url}: {e}")
            session.record_error(url, 'crawl_error', str(e))
            return []
        finally:
            session.finish(url)
