"""
Exceptions raised by the crawler components.
"""

from typing import Optional


class CrawlerError(Exception):
    """Base class for crawler errors."""


class RenderError(CrawlerError):
    """A page could not be rendered."""

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        self.reason = reason or "Failed to render page"
        super().__init__(f"{self.reason}: {url}")


class OutputError(CrawlerError):
    """Extracted content could not be written to disk."""

    def __init__(self, path: str, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f"Cannot write {path}: {error}")
