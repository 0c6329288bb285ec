"""
Markdown converter for rendered HTML documents.

Walks the BeautifulSoup tree depth-first and turns a fixed set of tags
into Markdown while keeping reading order.
"""

import re
from typing import Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from .extractor import parse_html
from ..utils.log import get_logger


class MarkdownConverter:
    """
    Converts a parsed HTML tree into Markdown text.

    Handles paragraphs, line breaks, headings h1-h4, list items,
    code blocks and divs. Every other tag contributes its inner text
    unchanged.
    """

    # Subtrees that never contribute text
    EXCLUDED_TAGS = frozenset({'script', 'style'})

    HEADING_LEVELS = {'h1': 1, 'h2': 2, 'h3': 3, 'h4': 4}

    CODE_TAGS = frozenset({'pre', 'code'})

    WHITESPACE_PATTERN = re.compile(r'\s+')

    # Three or more newlines collapse to one blank line
    EXCESS_NEWLINES_PATTERN = re.compile(r'\n{3,}')

    def __init__(self):
        self.logger = get_logger("markdown")

    def convert(self, root: PageElement) -> str:
        """
        Convert the children of a node into Markdown.

        Args:
            root: Root node, conventionally the document body

        Returns:
            Markdown text with at most one blank line between blocks
        """
        text = self._render_children(root)
        text = self.EXCESS_NEWLINES_PATTERN.sub('\n\n', text)
        return text.strip()

    def _render_children(self, element: PageElement) -> str:
        if not isinstance(element, Tag):
            return ''
        return ''.join(self._render_node(child) for child in element.children)

    def _render_node(self, node: PageElement) -> str:
        if isinstance(node, Tag):
            tag = (node.name or '').lower()
            if tag in self.EXCLUDED_TAGS:
                return ''
            return self._wrap(tag, self._render_children(node))

        # Comments, doctypes and CDATA are PreformattedString subclasses
        if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            return self.WHITESPACE_PATTERN.sub(' ', str(node))

        return ''

    def _wrap(self, tag: str, inner: str) -> str:
        if tag == 'p':
            return f"\n\n{inner}\n\n"
        if tag == 'br':
            return '\n'
        if tag in self.HEADING_LEVELS:
            hashes = '#' * self.HEADING_LEVELS[tag]
            return f"\n\n{hashes} {inner}\n\n"
        if tag == 'li':
            return f"\n- {inner}"
        if tag in self.CODE_TAGS:
            return f"\n```\n{inner}\n```\n"
        if tag == 'div':
            return f"\n{inner}\n"
        return inner

    def convert_html(self, html: Union[str, BeautifulSoup]) -> str:
        """
        Parse an HTML document and convert its body into Markdown.

        Args:
            html: HTML string or an already parsed document

        Returns:
            Markdown text
        """
        soup = parse_html(html) if isinstance(html, str) else html
        root = soup.body or soup
        markdown = self.convert(root)
        self.logger.debug(f"Converted document to {len(markdown)} characters of Markdown")
        return markdown


def html_to_markdown(html: Union[str, BeautifulSoup]) -> str:
    """Convert an HTML document into Markdown with the default converter."""
    return MarkdownConverter().convert_html(html)
