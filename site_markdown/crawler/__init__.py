"""
Crawler module for converting a site to Markdown.

Contains components for rendering, Markdown conversion, link extraction,
writing, and crawl orchestration.
"""

from .crawler import SiteCrawler, CrawlSession, CrawlResult, CrawlError, PageState
from .renderer import PageRenderer, Renderer
from .extractor import LinkExtractor, get_page_title, parse_html
from .markdown import MarkdownConverter, html_to_markdown
from .writer import OutputMode, ExtractedPage, PageTreeWriter, AggregateWriter, create_writer
from .errors import CrawlerError, RenderError, OutputError

__all__ = [
    "SiteCrawler",
    "CrawlSession",
    "CrawlResult",
    "CrawlError",
    "PageState",
    "PageRenderer",
    "Renderer",
    "LinkExtractor",
    "get_page_title",
    "parse_html",
    "MarkdownConverter",
    "html_to_markdown",
    "OutputMode",
    "ExtractedPage",
    "PageTreeWriter",
    "AggregateWriter",
    "create_writer",
    "CrawlerError",
    "RenderError",
    "OutputError",
]
