"""
Output writers for extracted pages.

Saves Markdown either as one file per page in a per-host folder tree or
as one aggregate file for the whole crawl.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from .errors import OutputError
from ..utils.log import get_logger
from ..utils.paths import page_output_location, aggregate_filename, ensure_parent_dir


class OutputMode(str, Enum):
    """How crawled pages are laid out on disk."""

    PAGES = "pages"
    SINGLE = "single"


@dataclass
class ExtractedPage:
    """Content extracted from one rendered page."""

    url: str
    title: str
    markdown: str


class PageTreeWriter:
    """
    Writes each page to ``<output_dir>/<host>/<title>.md``.
    """

    def __init__(self, output_dir: str):
        self.output_dir = output_dir
        self.logger = get_logger("writer")

        # Local path -> URL written there during this run
        self._written: Dict[str, str] = {}

    def write(self, page: ExtractedPage) -> str:
        """
        Save a page to its own Markdown file.

        Args:
            page: Extracted page

        Returns:
            Path of the written file

        Raises:
            OutputError: If the directory or file cannot be written
        """
        location = page_output_location(page.url, page.title)
        file_path = os.path.join(self.output_dir, location.folder, location.filename)

        previous = self._written.get(file_path)
        if previous and previous != page.url:
            self.logger.warning(f"{page.url} has the same output name as {previous}, overwriting {file_path}")

        content = f"# {page.title}\n\nSource: {page.url}\n\n{page.markdown}"
        _write_text(file_path, content)

        self._written[file_path] = page.url
        self.logger.info(f"Saved: {file_path}")
        return file_path

    def close(self, order: Optional[List[str]] = None) -> List[str]:
        """Return the paths written during this run."""
        return list(self._written)


class AggregateWriter:
    """
    Collects every page of a crawl into one Markdown file.

    The file is named after the start URL and written on ``close()``.
    """

    SECTION_TEMPLATE = "## Content from {url}\n\n{markdown}\n\n---\n\n"

    def __init__(self, output_dir: str, root_url: str):
        self.output_dir = output_dir
        self.root_url = root_url
        self.file_path = os.path.join(output_dir, aggregate_filename(root_url))
        self.logger = get_logger("writer")
        self._pages: List[ExtractedPage] = []

    def write(self, page: ExtractedPage) -> str:
        """Buffer a page until the crawl finishes."""
        self._pages.append(page)
        self.logger.debug(f"Collected {page.url} for {self.file_path}")
        return self.file_path

    def close(self, order: Optional[List[str]] = None) -> List[str]:
        """
        Write all collected pages to the aggregate file.

        Args:
            order: URLs in the order their sections should appear; pages
                not listed go last in completion order

        Returns:
            List holding the aggregate file path, or empty if nothing was collected

        Raises:
            OutputError: If the file cannot be written
        """
        if not self._pages:
            self.logger.warning(f"No pages collected, not writing {self.file_path}")
            return []

        pages = self._pages
        if order:
            rank = {url: index for index, url in enumerate(order)}
            pages = sorted(pages, key=lambda page: rank.get(page.url, len(rank)))

        content = "".join(
            self.SECTION_TEMPLATE.format(url=page.url, markdown=page.markdown)
            for page in pages
        )
        _write_text(self.file_path, content)

        self.logger.info(f"Saved: {self.file_path} ({len(pages)} pages)")
        return [self.file_path]


def _write_text(file_path: str, content: str) -> None:
    try:
        ensure_parent_dir(file_path)
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(content)
    except OSError as e:
        raise OutputError(file_path, e) from e


def create_writer(mode: OutputMode, output_dir: str, root_url: str):
    """
    Create the writer for an output mode.

    Args:
        mode: Output layout
        output_dir: Base output directory
        root_url: Start URL of the crawl

    Returns:
        PageTreeWriter or AggregateWriter
    """
    if OutputMode(mode) is OutputMode.SINGLE:
        return AggregateWriter(output_dir, root_url)
    return PageTreeWriter(output_dir)
