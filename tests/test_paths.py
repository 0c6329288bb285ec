"""Tests for URL normalization and output naming."""

import pytest

from site_markdown.utils.paths import (
    OutputLocation,
    aggregate_filename,
    is_same_host,
    normalize_url,
    page_output_location,
    slugify,
)


class TestNormalizeUrl:
    def test_root_relative(self) -> None:
        assert normalize_url("/b", "https://example.com/a/") == "https://example.com/b"

    def test_relative(self) -> None:
        assert normalize_url("../c?q=1", "https://example.com/a/b/") == "https://example.com/a/c?q=1"

    def test_protocol_relative_takes_base_scheme(self) -> None:
        assert normalize_url("//cdn.example.com/x", "http://example.com/") == "http://cdn.example.com/x"

    def test_removes_fragment_and_lowercases_host(self) -> None:
        assert normalize_url("https://Example.COM/Path#frag") == "https://example.com/Path"

    def test_empty_path_becomes_root(self) -> None:
        assert normalize_url("https://example.com") == "https://example.com/"

    def test_keeps_trailing_slash(self) -> None:
        assert normalize_url("https://example.com/docs/") == "https://example.com/docs/"

    @pytest.mark.parametrize("href", ["", "#top", "mailto:a@b.c", "javascript:alert(1)", "tel:1"])
    def test_non_navigational_input(self, href: str) -> None:
        assert normalize_url(href, "https://example.com/") == ""

    def test_malformed_url_raises(self) -> None:
        with pytest.raises(ValueError):
            normalize_url("http://[::1", "https://example.com/")


class TestIsSameHost:
    def test_same_host_different_port_and_scheme(self) -> None:
        assert is_same_host("http://example.com:8080/x", "https://example.com/") is True

    def test_www_is_a_different_host(self) -> None:
        assert is_same_host("https://www.example.com/", "https://example.com/") is False

    def test_relative_url_has_no_host(self) -> None:
        assert is_same_host("/x", "https://example.com/") is False


class TestSlugify:
    def test_title(self) -> None:
        assert slugify("Hello, World! 2024") == "hello-world-2024"

    def test_trims_dashes(self) -> None:
        assert slugify("  --Already--Slugged--  ") == "already-slugged"

    def test_non_ascii_only_gives_empty(self) -> None:
        assert slugify("日本語") == ""

    def test_none(self) -> None:
        assert slugify(None) == ""

    def test_truncates_without_trailing_dash(self) -> None:
        slug = slugify("a" * 79 + " b")
        assert slug == "a" * 79

    def test_max_length(self) -> None:
        assert len(slugify("x" * 200)) == 80


class TestPageOutputLocation:
    def test_title_based_name_and_host_folder(self) -> None:
        location = page_output_location("https://www.example.com/docs/", "Hello, World! 2024")
        assert location == OutputLocation("example-com", "hello-world-2024.md")

    def test_missing_title_on_root(self) -> None:
        assert page_output_location("https://example.com/", None) == OutputLocation("example-com", "index.md")

    def test_index_title_on_root(self) -> None:
        assert page_output_location("https://example.com/", "index").filename == "index.md"

    def test_index_title_uses_path(self) -> None:
        location = page_output_location("https://example.com/docs/getting-started", "index")
        assert location.filename == "docs-getting-started.md"

    def test_unsluggable_title_uses_path(self) -> None:
        assert page_output_location("https://example.com/about", "日本語").filename == "about.md"

    def test_unsluggable_title_on_root(self) -> None:
        assert page_output_location("https://example.com/", "!!!").filename == "index.md"

    def test_names_are_filesystem_safe(self) -> None:
        location = page_output_location("https://example.com/a%20b/c:d", "Title: <with> \"quotes\" / slashes")
        assert location.folder == "example-com"
        assert location.filename == "title-with-quotes-slashes.md"


class TestAggregateFilename:
    def test_strips_www_and_tld(self) -> None:
        assert aggregate_filename("https://www.example.com/") == "example.md"

    def test_adds_first_path_segment(self) -> None:
        assert aggregate_filename("https://docs.example.com/guide/intro") == "docs-example-guide.md"

    def test_ip_address_is_kept_whole(self) -> None:
        assert aggregate_filename("http://127.0.0.1:8000/") == "127-0-0-1.md"

    def test_single_label_host(self) -> None:
        assert aggregate_filename("http://localhost/") == "localhost.md"

    def test_falls_back_to_default(self) -> None:
        assert aggregate_filename("file:///tmp/page") == "tmp.md"
        assert aggregate_filename("https://!!!/") == "webpage.md"
