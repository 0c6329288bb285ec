#!/usr/bin/env python3
"""
Site Markdown - save a website as Markdown.

This tool renders a start page with Playwright, converts it to Markdown,
and does the same for every page on the same host that it links to.

Usage:
    site-markdown https://example.com ./output
    site-markdown https://example.com --mode single

Features:
    - Renders JavaScript pages with Playwright
    - Converts headings, paragraphs, lists and code blocks to Markdown
    - Follows same-host links one level deep
    - Writes one file per page or one file per crawl
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional
from urllib.parse import urlparse

from site_markdown import __version__
from site_markdown.crawler import SiteCrawler, OutputMode
from site_markdown.utils.constants import (
    DEFAULT_CONCURRENCY,
    DEFAULT_MAX_DEPTH,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PAGE_TIMEOUT,
    DEFAULT_SETTLE_DELAY,
)
from site_markdown.utils.log import (
    configure_logging,
    print_status,
    print_success,
    print_error,
    print_info
)


def positive_int(value: str) -> int:
    """argparse type for options that must be 1 or more."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Arguments to parse (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='site-markdown',
        description='Render a website and save its pages as Markdown',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s https://example.com
    %(prog)s https://example.com ./docs
    %(prog)s https://example.com --mode single --timeout 60000
        """
    )

    # Positional arguments
    parser.add_argument(
        'url',
        type=str,
        help='URL of the start page (e.g., https://example.com)'
    )

    parser.add_argument(
        'output',
        type=str,
        nargs='?',
        default=DEFAULT_OUTPUT_DIR,
        help='Output directory (default: current directory)'
    )

    # Optional arguments
    parser.add_argument(
        '--mode',
        type=str,
        choices=[mode.value for mode in OutputMode],
        default=OutputMode.PAGES.value,
        help='pages: one file per page in a folder per host; '
             'single: one file for the whole crawl (default: pages)'
    )

    parser.add_argument(
        '--timeout',
        type=positive_int,
        default=DEFAULT_PAGE_TIMEOUT,
        help=f'Page load timeout in milliseconds (default: {DEFAULT_PAGE_TIMEOUT})'
    )

    parser.add_argument(
        '--settle-delay',
        type=float,
        default=DEFAULT_SETTLE_DELAY,
        help=f'Seconds to wait for client-rendered content (default: {DEFAULT_SETTLE_DELAY})'
    )

    parser.add_argument(
        '--concurrency', '-c',
        type=positive_int,
        default=DEFAULT_CONCURRENCY,
        help=f'Maximum pages rendered at the same time (default: {DEFAULT_CONCURRENCY})'
    )

    parser.add_argument(
        '--depth', '-d',
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f'Link levels to follow from the start page (default: {DEFAULT_MAX_DEPTH})'
    )

    parser.add_argument(
        '--no-headless',
        action='store_true',
        help='Run browser in visible mode (useful for debugging)'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Also write log messages to this file'
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    verbosity.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress output except warnings and errors'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser.parse_args(argv)


def validate_url(url: str) -> str:
    """
    Validate and normalize the input URL.

    Args:
        url: URL string to validate

    Returns:
        URL with a scheme

    Raises:
        ValueError: If URL is invalid
    """
    # Add protocol if missing
    if not url.lower().startswith(('http://', 'https://')):
        url = 'https://' + url

    parsed = urlparse(url)

    if not parsed.hostname:
        raise ValueError(f"Invalid URL: {url}")

    return url


def print_banner() -> None:
    """Print the application banner."""
    banner = f"""
╔═══════════════════════════════════════════════════════════════╗
║                     SITE MARKDOWN v{__version__:<27}║
║           Render a website and save it as Markdown            ║
╚═══════════════════════════════════════════════════════════════╝
    """
    print_status(banner, "bold cyan")


def print_summary(result) -> None:
    """
    Print the crawl summary.

    Args:
        result: CrawlResult object
    """
    print("\n" + "=" * 60)
    print_success("CRAWL SUMMARY")
    print("=" * 60)
    print(f"  Pages crawled:     {result.pages_crawled}")
    print(f"  Pages saved:       {result.pages_saved}")
    print(f"  Links discovered:  {len(result.discovered)}")
    print(f"  Errors:            {len(result.errors)}")
    print(f"  Duration:          {result.duration_seconds:.1f} seconds")

    for error in result.errors:
        print(f"    [{error.type}] {error.url}: {error.message}")

    print("=" * 60 + "\n")


async def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the site crawler.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    # Parse arguments
    args = parse_arguments(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else (logging.WARNING if args.quiet else logging.INFO)
    configure_logging(level=log_level, log_file=args.log_file)

    # Print banner
    if not args.quiet:
        print_banner()

    try:
        # Validate URL
        url = validate_url(args.url)

        # Print configuration
        if not args.quiet:
            print_info(f"Target URL: {url}")
            print_info(f"Output: {args.output} ({args.mode} mode)")
            print_info(f"Depth: {args.depth}, Concurrency: {args.concurrency}, Timeout: {args.timeout}ms")

        # Create crawler
        crawler = SiteCrawler(
            url=url,
            output_dir=args.output,
            mode=OutputMode(args.mode),
            timeout=args.timeout,
            settle_delay=args.settle_delay,
            concurrency=args.concurrency,
            max_depth=args.depth,
            headless=not args.no_headless
        )

        # Run the crawl
        result = await crawler.crawl()

        # Print summary and output location
        if not args.quiet:
            print_summary(result)

            if crawler.mode is OutputMode.SINGLE:
                for path in result.files:
                    print_success(f"Crawl saved to: {path}")
            else:
                print_success(f"Markdown saved under: {os.path.abspath(args.output)}")

        return 0

    except KeyboardInterrupt:
        print_error("\nCrawl interrupted by user")
        return 1
    except ValueError as e:
        print_error(f"Invalid input: {e}")
        return 1
    except Exception as e:
        print_error(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def run() -> None:
    """Entry point wrapper for running as module."""
    sys.exit(asyncio.run(main()))


if __name__ == '__main__':
    run()
