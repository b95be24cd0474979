"""
In-process Playwright launcher.

Owns the Playwright driver, one browser, one context and a default page for
a scenario, and releases all of them on exit.

Usage:
    from rediff_ui.playwright_client import PlaywrightClient

    async with PlaywrightClient() as client:
        await client.page.goto("https://www.rediff.com/")
"""

import logging
from typing import Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from rediff_ui.config import settings

logger = logging.getLogger(__name__)


class PlaywrightClient:
    """
    Launches a browser for one scenario.

    Example:
        async with PlaywrightClient(headless=False) as client:
            page = client.page
            await page.goto("https://www.rediff.com/")
    """

    def __init__(
        self,
        browser_type: Optional[str] = None,
        headless: Optional[bool] = None,
        timeout: Optional[int] = None,
    ):
        """
        Args:
            browser_type: chromium, firefox or webkit (None = from settings)
            headless: Run in headless mode (None = from settings)
            timeout: Default timeout in milliseconds (None = from settings)
        """
        self.browser_type = browser_type or settings.playwright_browser
        self.headless = settings.playwright_headless if headless is None else headless
        self.timeout = settings.playwright_timeout_ms if timeout is None else timeout

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def __aenter__(self) -> "PlaywrightClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def connect(self) -> None:
        """Launch the browser and open the default context and page."""
        self._playwright = await async_playwright().start()

        if self.browser_type == "firefox":
            launcher = self._playwright.firefox
        elif self.browser_type == "webkit":
            launcher = self._playwright.webkit
        else:
            launcher = self._playwright.chromium
        self._browser = await launcher.launch(headless=self.headless)
        logger.info("Launched %s (headless=%s)", self.browser_type, self.headless)

        self._context = await self._browser.new_context()
        self._context.set_default_timeout(self.timeout)
        self._page = await self._context.new_page()

    async def close(self) -> None:
        """Close page, context, browser and driver, in that order."""
        if self._page:
            await self._page.close()
            self._page = None

        if self._context:
            await self._context.close()
            self._context = None

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    @property
    def context(self) -> BrowserContext:
        if not self._context:
            raise RuntimeError("Client not connected. Use 'async with' or call connect()")
        return self._context

    @property
    def page(self) -> Page:
        if not self._page:
            raise RuntimeError("Client not connected or page not created")
        return self._page

