"""Tests for the HTML to Markdown converter."""

import pytest
from bs4 import NavigableString

from site_markdown.crawler.extractor import parse_html
from site_markdown.crawler.markdown import MarkdownConverter, html_to_markdown


@pytest.fixture
def converter() -> MarkdownConverter:
    return MarkdownConverter()


def test_heading_and_paragraph() -> None:
    html = "<h2>Title</h2><p>Hello <b>world</b></p>"
    assert html_to_markdown(html) == "## Title\n\nHello world"


@pytest.mark.parametrize("tag, prefix", [("h1", "#"), ("h2", "##"), ("h3", "###"), ("h4", "####")])
def test_heading_levels(tag: str, prefix: str) -> None:
    assert html_to_markdown(f"<{tag}>Heading</{tag}>") == f"{prefix} Heading"


def test_h5_passes_through() -> None:
    assert html_to_markdown("<h5>Small</h5>") == "Small"


def test_list_items() -> None:
    html = "<ul><li>One</li><li>Two</li></ul>"
    assert html_to_markdown(html) == "- One\n- Two"


def test_code_block() -> None:
    assert html_to_markdown("<pre>x = 1</pre>") == "```\nx = 1\n```"


def test_line_break() -> None:
    assert html_to_markdown("<p>first<br>second</p>") == "first\nsecond"


def test_divs_are_separated_by_newlines() -> None:
    assert html_to_markdown("<div>a</div><div>b</div>") == "a\n\nb"


def test_unknown_tags_pass_inner_text_through() -> None:
    html = "<p><span>Hello</span> <a href='/x'>there</a> <em>friend</em></p>"
    assert html_to_markdown(html) == "Hello there friend"


def test_whitespace_in_text_is_collapsed() -> None:
    html = "<p>Hello\n      world\t\tagain</p>"
    assert html_to_markdown(html) == "Hello world again"


def test_script_and_style_are_excluded() -> None:
    html = """
    <html><head><style>.hidden { color: red }</style></head>
    <body>
      <p>Visible</p>
      <script>var secret = "do not show";</script>
      <div><style>.inner { margin: 0 }</style>Also visible</div>
    </body></html>
    """
    text = html_to_markdown(html)
    assert "Visible" in text
    assert "Also visible" in text
    assert "secret" not in text
    assert "color" not in text
    assert "margin" not in text


def test_comments_are_ignored() -> None:
    assert html_to_markdown("<p>a<!-- hidden -->b</p>") == "ab"


def test_never_more_than_two_newlines() -> None:
    html = (
        "<p></p><p></p><div><p>x</p></div>"
        "<br><br><br><br>y<h1>z</h1><div><div><div>w</div></div></div>"
    )
    assert "\n\n\n" not in html_to_markdown(html)


def test_result_is_trimmed() -> None:
    text = html_to_markdown("<div><p>  padded  </p></div>")
    assert text == text.strip()


def test_empty_document() -> None:
    assert html_to_markdown("") == ""


def test_convert_non_element_returns_empty(converter: MarkdownConverter) -> None:
    assert converter.convert(NavigableString("loose text")) == ""


def test_convert_uses_only_children_of_root(converter: MarkdownConverter) -> None:
    soup = parse_html("<body><main><h3>Inside</h3></main><footer>Outside</footer></body>")
    assert converter.convert(soup.find("main")) == "### Inside"


def test_convert_does_not_modify_the_tree(converter: MarkdownConverter) -> None:
    soup = parse_html("<body><p>text</p><script>code()</script></body>")
    converter.convert_html(soup)
    assert soup.find("script") is not None
