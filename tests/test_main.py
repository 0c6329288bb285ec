"""Tests for the command line interface."""

from unittest.mock import AsyncMock, patch
from urllib.parse import urlparse

import pytest

from site_markdown.crawler.crawler import CrawlError, CrawlResult
from site_markdown.crawler.writer import OutputMode
from site_markdown.main import main, parse_arguments, validate_url


class TestParseArguments:
    def test_missing_url_exits_with_usage_error(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments([])
        assert exc_info.value.code == 2
        assert "url" in capsys.readouterr().err

    def test_defaults(self) -> None:
        args = parse_arguments(["https://example.com"])
        assert args.url == "https://example.com"
        assert args.output == "."
        assert args.mode == "pages"
        assert args.timeout == 30000
        assert args.depth == 1

    def test_output_dir_and_options(self) -> None:
        args = parse_arguments(["example.com", "out", "--mode", "single", "-c", "3", "--settle-delay", "0.5"])
        assert args.output == "out"
        assert args.mode == "single"
        assert args.concurrency == 3
        assert args.settle_delay == 0.5

    def test_unknown_mode_is_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments(["https://example.com", "--mode", "zip"])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize("option", ["--concurrency", "--timeout"])
    @pytest.mark.parametrize("value", ["0", "-3", "many"])
    def test_non_positive_numbers_are_rejected(self, option: str, value: str, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments(["https://example.com", option, value])
        assert exc_info.value.code == 2
        assert option in capsys.readouterr().err


class TestValidateUrl:
    def test_adds_scheme(self) -> None:
        assert validate_url("example.com/docs") == "https://example.com/docs"

    def test_keeps_http(self) -> None:
        assert validate_url("http://example.com") == "http://example.com"

    def test_scheme_is_case_insensitive(self) -> None:
        url = validate_url("HTTPS://Example.com/docs")
        assert url == "HTTPS://Example.com/docs"
        assert urlparse(url).hostname == "example.com"

    def test_rejects_missing_host(self) -> None:
        with pytest.raises(ValueError):
            validate_url("https://")


@pytest.mark.asyncio
async def test_main_runs_crawl(tmp_path) -> None:
    result = CrawlResult(
        pages_crawled=2,
        pages_saved=1,
        errors=[CrawlError("https://example.com/a", "render_error", "Failed to render page")],
    )
    with patch("site_markdown.main.SiteCrawler") as crawler_cls:
        crawler_cls.return_value.crawl = AsyncMock(return_value=result)
        crawler_cls.return_value.mode = OutputMode.PAGES

        code = await main(["example.com", str(tmp_path), "--mode", "pages", "--quiet"])

    assert code == 0
    kwargs = crawler_cls.call_args.kwargs
    assert kwargs["url"] == "https://example.com"
    assert kwargs["output_dir"] == str(tmp_path)
    assert kwargs["mode"] is OutputMode.PAGES
    assert kwargs["headless"] is True


@pytest.mark.asyncio
async def test_quiet_prints_nothing(tmp_path, capsys) -> None:
    with patch("site_markdown.main.SiteCrawler") as crawler_cls:
        crawler_cls.return_value.crawl = AsyncMock(return_value=CrawlResult(pages_crawled=1, pages_saved=1))
        crawler_cls.return_value.mode = OutputMode.PAGES

        code = await main(["https://example.com", str(tmp_path), "--quiet"])

    assert code == 0
    assert capsys.readouterr().out == ""


@pytest.mark.asyncio
async def test_main_invalid_url_returns_error() -> None:
    with patch("site_markdown.main.SiteCrawler") as crawler_cls:
        code = await main(["https://", "--quiet"])

    assert code == 1
    crawler_cls.assert_not_called()


@pytest.mark.asyncio
async def test_main_crawl_failure_returns_error(tmp_path) -> None:
    with patch("site_markdown.main.SiteCrawler") as crawler_cls:
        crawler_cls.return_value.crawl = AsyncMock(side_effect=RuntimeError("boom"))
        code = await main(["https://example.com", str(tmp_path), "--quiet"])

    assert code == 1
