"""
Page renderer using Playwright for JavaScript rendering.

Handles headless browser rendering to capture dynamically generated content.
"""

import asyncio
from typing import Optional, Protocol

from playwright.async_api import async_playwright, Error as PlaywrightError, TimeoutError as PlaywrightTimeout

from .errors import RenderError
from ..utils.log import get_logger
from ..utils.constants import DEFAULT_USER_AGENT, DEFAULT_PAGE_TIMEOUT, DEFAULT_SETTLE_DELAY


class Renderer(Protocol):
    """Anything that can turn a URL into rendered HTML."""

    async def render(self, url: str) -> Optional[str]:
        ...


class PageRenderer:
    """
    Renders web pages using Playwright headless browser.

    Captures the final DOM after JavaScript execution. Every render launches
    its own browser, which is closed again on every exit path.
    """

    def __init__(
        self,
        timeout: int = DEFAULT_PAGE_TIMEOUT,
        settle_delay: float = DEFAULT_SETTLE_DELAY,
        wait_until: str = "networkidle",
        headless: bool = True,
        user_agent: str = DEFAULT_USER_AGENT
    ):
        """
        Initialize the page renderer.

        Args:
            timeout: Page load timeout in milliseconds
            settle_delay: Seconds to wait after load for client-rendered content
            wait_until: Event to wait for ('load', 'domcontentloaded', 'networkidle')
            headless: Run browser in headless mode
            user_agent: User agent for the browser context
        """
        self.timeout = timeout
        self.settle_delay = settle_delay
        self.wait_until = wait_until
        self.headless = headless
        self.user_agent = user_agent
        self.logger = get_logger("renderer")

    @property
    def deadline(self) -> float:
        """Upper bound in seconds for one whole render."""
        return self.timeout / 1000 + self.settle_delay

    async def render(self, url: str) -> Optional[str]:
        """
        Render a page and return the final HTML content.

        Args:
            url: URL to render

        Returns:
            HTML content, or None on error
        """
        try:
            return await self.render_or_raise(url)
        except RenderError as e:
            self.logger.warning(str(e))
            return None
        except Exception as e:
            self.logger.error(f"Error rendering {url}: {e}")
            return None

    async def render_or_raise(self, url: str) -> str:
        """
        Render a page and return the final HTML content.

        Args:
            url: URL to render

        Returns:
            HTML content

        Raises:
            RenderError: On timeout, navigation error or HTTP error status
        """
        try:
            return await asyncio.wait_for(self._render(url), timeout=self.deadline)
        except (PlaywrightTimeout, asyncio.TimeoutError):
            raise RenderError(url, "Timeout rendering")
        except PlaywrightError as e:
            raise RenderError(url, f"Navigation failed ({e.message})")

    async def _render(self, url: str) -> str:
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(
                headless=self.headless,
                args=[
                    '--disable-blink-features=AutomationControlled',
                    '--no-sandbox',
                    '--disable-setuid-sandbox',
                    '--disable-dev-shm-usage',
                ]
            )

            try:
                context = await browser.new_context(
                    user_agent=self.user_agent,
                    viewport={"width": 1920, "height": 1080},
                    ignore_https_errors=True,
                )
                page = await context.new_page()

                self.logger.debug(f"Rendering: {url}")
                response = await page.goto(
                    url,
                    wait_until=self.wait_until,
                    timeout=self.timeout
                )

                if not response:
                    raise RenderError(url, "No response")

                if response.status >= 400:
                    raise RenderError(url, f"HTTP {response.status}")

                await page.wait_for_load_state("domcontentloaded", timeout=self.timeout)

                # Wait for any additional dynamic content
                await asyncio.sleep(self.settle_delay)

                html_content = await page.content()

                self.logger.debug(f"Successfully rendered: {page.url}")

                return html_content
            finally:
                await browser.close()
