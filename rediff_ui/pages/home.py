"""Rediff home page: the entry point of every scenario."""
from __future__ import annotations

import logging

from playwright.async_api import Error as PlaywrightError

from rediff_ui.errors import NavigationError
from rediff_ui.pages.base import BasePage
from rediff_ui.pages.bindings import CREATE_ACCOUNT_LINK

logger = logging.getLogger(__name__)


class HomePage(BasePage):
    async def navigate(self) -> None:
        """Load the application root and wait for the ``load`` event."""
        url = self.config.base_url
        try:
            await self.page.goto(url, wait_until="load")
        except PlaywrightError as exc:
            logger.error("Navigation to %s failed: %s", url, exc)
            raise NavigationError(name="navigate", message=str(exc), payload={"url": url}) from exc
        logger.info("Loaded %s", url)

    async def go_to_create_account(self) -> None:
        link = await self.wait_visible(
            CREATE_ACCOUNT_LINK, self.config.create_account_link_timeout, "go_to_create_account"
        )
        await self.click(link, "go_to_create_account")
        logger.info("Clicked the Create Account link.")
