"""
Shared constants for the site crawler.

Contains common configuration values used across multiple modules.
"""

# Default user agent string for the browser context
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# Default page load timeout in milliseconds (for Playwright)
DEFAULT_PAGE_TIMEOUT = 30000

# Extra wait after load so client-rendered content can settle, in seconds
DEFAULT_SETTLE_DELAY = 2.0

# Maximum pages rendered at the same time
DEFAULT_CONCURRENCY = 10

# Root page plus its direct links
DEFAULT_MAX_DEPTH = 1

# Default output directory
DEFAULT_OUTPUT_DIR = "."

# Fallback title and slug
DEFAULT_NAME = "index"

# Fallback file stem for the single-file output mode
DEFAULT_AGGREGATE_NAME = "webpage"

# Slugs longer than this are truncated
MAX_SLUG_LENGTH = 80

# Links to these file types are never crawled
ASSET_EXTENSIONS = (
    "png", "jpg", "jpeg", "gif", "svg", "ico",
    "css", "js",
    "woff", "woff2", "ttf", "eot",
)

# Path fragments reserved for build output and static files
ASSET_PATH_MARKERS = ("/_next/", "/static/")

# Non-navigational hrefs
SKIPPED_HREF_PREFIXES = ("#", "javascript:", "mailto:", "tel:")
