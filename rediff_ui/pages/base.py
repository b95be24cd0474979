"""Behaviour shared by every page object."""
from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

import anyio
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeout

from rediff_ui.artifacts import ArtifactRecorder
from rediff_ui.config import UiTestConfig, settings
from rediff_ui.errors import ElementNotReadyError
from rediff_ui.pages.bindings import ALL_LINKS, LocatorSpec

logger = logging.getLogger(__name__)


async def wait_until(
    predicate: Callable[[], Awaitable[bool]],
    timeout: float,
    interval: float = 0.2,
) -> bool:
    """Poll ``predicate`` until it returns True or ``timeout`` seconds pass.

    Returns whether the predicate was satisfied; the caller decides what a
    timeout means.
    """
    deadline = anyio.current_time() + timeout
    while True:
        if await predicate():
            return True
        if anyio.current_time() >= deadline:
            return False
        await anyio.sleep(interval)


class BasePage:
    def __init__(
        self,
        page: Page,
        recorder: Optional[ArtifactRecorder] = None,
        config: Optional[UiTestConfig] = None,
    ) -> None:
        self.page = page
        self.recorder = recorder if recorder is not None else ArtifactRecorder()
        self.config = config if config is not None else settings

    def locate(self, spec: LocatorSpec) -> Locator:
        return spec.resolve(self.page)

    async def title(self) -> str:
        return await self.page.title()

    def list_links(self) -> Locator:
        """Live locator over every anchor on the page."""
        return self.locate(ALL_LINKS)

    async def link_count(self) -> int:
        return await self.list_links().count()

    async def wait_visible(self, spec: LocatorSpec, timeout: float, operation: str) -> Locator:
        locator = self.locate(spec)
        try:
            await locator.wait_for(state="visible", timeout=timeout * 1000)
        except PlaywrightTimeout as exc:
            logger.error("%s: %s not visible within %.1fs", operation, spec.describe(), timeout)
            raise ElementNotReadyError(
                name=operation,
                message=f"{spec.describe()} not visible within {timeout}s",
                payload={"locator": spec.describe(), "timeout": timeout},
            ) from exc
        except PlaywrightError as exc:
            logger.error("%s: waiting for %s failed: %s", operation, spec.describe(), exc)
            raise
        return locator

    async def click(self, locator: Locator, operation: str) -> None:
        try:
            await locator.click()
        except PlaywrightError as exc:
            logger.error("%s: click failed: %s", operation, exc)
            raise

    async def wait_visible_and_enabled(self, spec: LocatorSpec, timeout: float, operation: str) -> Locator:
        """Wait for ``spec`` to be visible, then enabled, within one shared bound."""
        deadline = anyio.current_time() + timeout
        locator = await self.wait_visible(spec, timeout, operation)
        remaining = max(deadline - anyio.current_time(), 0.0)

        try:
            enabled = await wait_until(locator.is_enabled, remaining)
        except PlaywrightError as exc:
            logger.error("%s: could not read enabled state of %s: %s", operation, spec.describe(), exc)
            raise ElementNotReadyError(
                name=operation,
                message=f"{spec.describe()} enabled state unreadable",
                payload={"locator": spec.describe()},
            ) from exc
        if not enabled:
            logger.error("%s: %s not enabled within %.1fs", operation, spec.describe(), timeout)
            raise ElementNotReadyError(
                name=operation,
                message=f"{spec.describe()} not enabled within {timeout}s",
                payload={"locator": spec.describe(), "timeout": timeout},
            )
        return locator
