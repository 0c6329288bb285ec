"""
Site Markdown - render a website with a headless browser and save it as Markdown.

This package crawls a start page and the same-host pages it links to,
converts each rendered page into structured Markdown, and writes the
result to disk.
"""

__version__ = "1.0.0"
__author__ = "Site Markdown Team"
