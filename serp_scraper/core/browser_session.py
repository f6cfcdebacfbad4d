"""
Browser session - Owns a single Playwright browser instance.

Also defines the page automation capability the rest of the scraper
consumes. A Playwright async ``Page`` satisfies it as-is, and tests can
substitute an in-memory fake.
"""

from typing import Any, List, Optional, Protocol

from playwright.async_api import async_playwright

from serp_scraper.config import ScraperSettings
from serp_scraper.core.errors import LaunchFailure, NotInitialized
from serp_scraper.utils.helpers import StructuredLogger


class PageElement(Protocol):
    """An element handle returned by a DOM query."""

    async def text_content(self) -> Optional[str]: ...

    async def click(self) -> None: ...


class PageAutomation(Protocol):
    """Page operations needed by the scroll detector, extractor and sessions."""

    async def goto(self, url: str, **kwargs: Any) -> Any: ...

    async def evaluate(self, expression: str, arg: Any = None) -> Any: ...

    async def eval_on_selector_all(self, selector: str, expression: str, arg: Any = None) -> Any: ...

    async def query_selector_all(self, selector: str) -> List[PageElement]: ...


class BrowserSession:
    """
    Wraps acquisition and release of exactly one browser instance.

    There is no retry built in: if acquire() fails the caller must decide
    whether to try again.
    """

    def __init__(self, settings: Optional[ScraperSettings] = None):
        self.settings = settings or ScraperSettings()
        self.playwright = None
        self.browser = None
        self.log = StructuredLogger("BrowserSession")

    @property
    def is_acquired(self) -> bool:
        return self.browser is not None

    async def acquire(self) -> None:
        """
        Start Playwright and launch Chromium.

        Raises:
            LaunchFailure: If the engine cannot start. No instance is kept.
        """
        if self.browser is not None:
            return

        playwright = None
        try:
            playwright = await async_playwright().start()
            browser = await playwright.chromium.launch(headless=self.settings.headless)
        except Exception as e:
            self.log.error(f"Failed to launch browser instance: {e}")
            if playwright is not None:
                try:
                    await playwright.stop()
                except Exception as stop_error:
                    self.log.debug(f"Playwright stop after failed launch: {stop_error}")
            raise LaunchFailure(f"Failed to launch browser instance: {e}") from e

        self.playwright = playwright
        self.browser = browser
        self.log.success(f"Browser launched (headless={self.settings.headless})")

    async def new_page(self) -> PageAutomation:
        """
        Open a new page in the owned browser.

        Raises:
            NotInitialized: If acquire() has not succeeded.
        """
        if self.browser is None:
            raise NotInitialized("Browser instance is not launched yet")

        page = await self.browser.new_page()
        page.set_default_navigation_timeout(self.settings.navigation_timeout_ms)
        return page

    async def release(self) -> None:
        """
        Close the browser and stop Playwright.

        Handles are cleared before closing, so a second call is a no-op.

        Raises:
            LaunchFailure: If closing failed on this call.
        """
        browser, playwright = self.browser, self.playwright
        self.browser = None
        self.playwright = None

        if browser is None and playwright is None:
            return

        errors = []
        if browser is not None:
            try:
                await browser.close()
            except Exception as e:
                errors.append(e)
        if playwright is not None:
            try:
                await playwright.stop()
            except Exception as e:
                errors.append(e)

        if errors:
            raise LaunchFailure(f"Failed to close browser instance: {errors[0]}") from errors[0]

        self.log.info("Browser closed")
