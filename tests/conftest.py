"""
Shared fakes for the scraper tests.

FakePage implements the page automation capability over an in-memory DOM
model, so sessions, the scroll detector and the extractor run without a
browser and without real sleeps.
"""

from typing import Any, Callable, Dict, List, Optional

import pytest

from serp_scraper.config import ScraperSettings
from serp_scraper.core.errors import LaunchFailure, NotInitialized
from serp_scraper.utils.constants import (
    SCROLL_TO_BOTTOM_SCRIPT,
    FIND_MARKER_SCRIPT,
    ANY_ELEMENT_SCRIPT,
    EXTRACT_RESULTS_SCRIPT,
)


def make_link(index: int, url: Optional[str] = None) -> Dict[str, Any]:
    return {
        "url": url or f"https://example.com/page-{index}",
        "text": f"Result {index}",
        "title": f"Result {index} https://example.com/page-{index}",
        "description": None,
    }


class FakeElement:
    def __init__(self, text: Optional[str], on_click: Optional[Callable[[], None]] = None):
        self.text = text
        self.on_click = on_click
        self.clicks = 0

    async def text_content(self) -> Optional[str]:
        return self.text

    async def click(self) -> None:
        self.clicks += 1
        if self.on_click:
            self.on_click()


class FakePage:
    """
    In-memory results page.

    Args:
        links: Raw link dicts returned for the result selector
        marker_texts: Successive loading marker reads. The last value repeats
            once the list is used up; an empty list means the marker is absent.
        pagination: Whether the pagination selector matches
        controls: Elements returned by query_selector_all, keyed by selector
    """

    def __init__(
        self,
        links: Optional[List[Dict[str, Any]]] = None,
        marker_texts: Optional[List[Optional[str]]] = None,
        pagination: bool = False,
        controls: Optional[Dict[str, List[FakeElement]]] = None,
    ):
        self.links = list(links or [])
        self.marker_texts = list(marker_texts or [])
        self.pagination = pagination
        self.controls = controls or {}
        self.goto_calls: List[str] = []
        self.scrolls = 0
        self.marker_reads = 0
        self.pagination_checks = 0
        self.extract_calls: List[Dict[str, Any]] = []
        self.marker_error: Optional[Exception] = None
        self.goto_error: Optional[Exception] = None

    async def goto(self, url: str, **kwargs: Any) -> None:
        if self.goto_error:
            raise self.goto_error
        self.goto_calls.append(url)

    async def evaluate(self, expression: str, arg: Any = None) -> Any:
        if expression == SCROLL_TO_BOTTOM_SCRIPT:
            self.scrolls += 1
            return None
        raise AssertionError(f"Unexpected script: {expression}")

    async def eval_on_selector_all(self, selector: str, expression: str, arg: Any = None) -> Any:
        if expression == FIND_MARKER_SCRIPT:
            if self.marker_error:
                raise self.marker_error
            self.marker_reads += 1
            if not self.marker_texts:
                return None
            if len(self.marker_texts) > 1:
                return self.marker_texts.pop(0)
            return self.marker_texts[0]
        if expression == ANY_ELEMENT_SCRIPT:
            self.pagination_checks += 1
            return self.pagination
        if expression == EXTRACT_RESULTS_SCRIPT:
            self.extract_calls.append({"selector": selector, "options": arg})
            return [dict(link) for link in self.links]
        raise AssertionError(f"Unexpected script: {expression}")

    async def query_selector_all(self, selector: str) -> List[FakeElement]:
        return list(self.controls.get(selector, []))


class FakeBrowserSession:
    """Stands in for BrowserSession, handing out prepared pages."""

    def __init__(self, pages: Optional[List[FakePage]] = None, fail_launch: int = 0, fail_release: bool = False):
        self.pages = list(pages or [])
        self.fail_launch = fail_launch
        self.fail_release = fail_release
        self.acquired = False
        self.acquire_calls = 0
        self.release_calls = 0
        self.opened: List[FakePage] = []

    async def acquire(self) -> None:
        self.acquire_calls += 1
        if self.fail_launch:
            self.fail_launch -= 1
            raise LaunchFailure("Failed to launch browser instance: boom")
        self.acquired = True

    async def new_page(self) -> FakePage:
        if not self.acquired:
            raise NotInitialized("Browser instance is not launched yet")
        page = self.pages.pop(0) if self.pages else FakePage()
        self.opened.append(page)
        return page

    async def release(self) -> None:
        self.release_calls += 1
        was_acquired = self.acquired
        self.acquired = False
        if self.fail_release and was_acquired:
            raise LaunchFailure("Failed to close browser instance: boom")


class SleepRecorder:
    """Async sleep that returns immediately and records requested delays."""

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sleep() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def settings() -> ScraperSettings:
    return ScraperSettings(scroll_counter=3, settle_delay_s=1.0, poll_interval_s=0.2, results_delay_s=0.2)
