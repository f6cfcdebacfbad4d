"""
Search sessions - The public contract and the shared state machine.

    UNINITIALIZED --init()--> READY --search()--> SEARCH_ACTIVE
    SEARCH_ACTIVE --get_results() / next_page()--> SEARCH_ACTIVE
    any --dispose()--> UNINITIALIZED

Concrete engines only supply their kind and an EngineProfile; navigation,
scroll convergence and extraction are shared.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import ClassVar, List, Optional

from serp_scraper.config import ScraperSettings
from serp_scraper.core.browser_session import BrowserSession, PageAutomation
from serp_scraper.core.errors import InvalidQuery, LaunchFailure, NotInitialized, NotOnSearchPage
from serp_scraper.core.extractor import ResultExtractor
from serp_scraper.core.schemas import EngineProfile, SearchEngineKind, SearchQueryResult, SearchResult
from serp_scraper.core.scroll import ConvergenceReport, ScrollConvergenceDetector, Sleep
from serp_scraper.core.state import SessionState
from serp_scraper.utils.helpers import StructuredLogger, construct_url


class SearchEngine(ABC):
    """Contract every search engine implementation satisfies."""

    kind: ClassVar[SearchEngineKind]

    @abstractmethod
    async def init(self) -> None:
        """Acquire a browser instance."""

    @abstractmethod
    async def search(self, query: str) -> bool:
        """Search for query; True once the results page has been loaded."""

    @abstractmethod
    async def next_page(self) -> List[SearchResult]:
        """Load the next batch of results and return the results now on the page."""

    @abstractmethod
    async def get_results(self) -> SearchQueryResult:
        """Extract the results currently on the page."""

    @abstractmethod
    async def dispose(self) -> None:
        """Release the browser instance. Never raises."""


class SearchSession(SearchEngine):
    """
    State machine shared by all engines.

    One session drives one page at a time. Calls on the same session must be
    awaited one after another; there is no internal locking.

    Args:
        settings: Launch, wait and convergence tunables
        browser: Browser session to own (a new one is created if omitted)
        sleep: Awaitable sleep for fixed waits (injectable for tests)
    """

    profile: ClassVar[EngineProfile]

    def __init__(
        self,
        settings: Optional[ScraperSettings] = None,
        browser: Optional[BrowserSession] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        if not isinstance(getattr(type(self), "profile", None), EngineProfile):
            raise TypeError(f"{type(self).__name__} must define an EngineProfile as 'profile'")

        self.settings = settings or ScraperSettings()
        self.browser = browser or BrowserSession(self.settings)
        self.sleep = sleep
        self.state = SessionState.UNINITIALIZED
        self.page: Optional[PageAutomation] = None
        self.query: Optional[str] = None
        self.last_convergence: Optional[ConvergenceReport] = None
        self.detector = ScrollConvergenceDetector(
            loading_marker=self.profile.loading_marker,
            pagination_selector=self.profile.pagination_selector,
            scroll_counter=self.settings.scroll_counter,
            poll_interval=self.settings.poll_interval_s,
            sleep=sleep,
        )
        self.extractor = ResultExtractor(self.profile)
        self.log = StructuredLogger(type(self).__name__)

    async def __aenter__(self) -> "SearchSession":
        await self.init()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.dispose()

    async def init(self) -> None:
        """
        Launch the browser.

        Raises:
            LaunchFailure: The session stays UNINITIALIZED and init() may be retried.
        """
        if self.state is not SessionState.UNINITIALIZED:
            self.log.warning("init() called on an initialized session, ignoring")
            return

        await self.browser.acquire()
        self.state = SessionState.READY

    async def search(self, query: str) -> bool:
        """
        Search for a query on this engine.

        Opens a new page (replacing any previous one), navigates to the
        results URL, waits for the page to settle and scrolls until results
        converge. Convergence is best effort: hitting the attempt bound is not
        an error.

        Args:
            query: Query string to search

        Returns:
            True if the search page was loaded

        Raises:
            InvalidQuery: Empty or whitespace-only query; state is unchanged.
            NotInitialized: init() has not succeeded.
        """
        if not query or not query.strip():
            raise InvalidQuery("Invalid query")

        if self.state is SessionState.UNINITIALIZED:
            raise NotInitialized("Browser instance is not launched yet")

        url = construct_url(self.profile.search_url, query, self.profile.query_param)
        self.log.info(f"Searching: {url}")

        self.page = await self.browser.new_page()
        self.query = query
        try:
            await self.page.goto(url)
            await self.sleep(self.settings.settle_delay_s)
            self.last_convergence = await self.detector.converge(self.page)
        except Exception:
            self.page = None
            self.state = SessionState.READY
            raise

        self.state = SessionState.SEARCH_ACTIVE
        self.log.success(f"Search page loaded for '{query}'")
        return True

    async def next_page(self) -> List[SearchResult]:
        """
        Load more results and return everything now on the page.

        Clicks the engine's "more results" control when it is present. When
        it is absent the content may still be below the fold, so scrolling
        is attempted instead.

        Raises:
            NotOnSearchPage: search() has not completed.
        """
        self._require_search_page()

        if await self._click_next_page_control():
            await self.sleep(self.settings.settle_delay_s)
        else:
            self.log.info("No 'more results' control found, scrolling instead")

        self.last_convergence = await self.detector.converge(self.page)
        return await self.extractor.extract(self.page)

    async def get_results(self) -> SearchQueryResult:
        """
        Scrape result links from the current page.

        Raises:
            NotOnSearchPage: search() has not completed.
        """
        self._require_search_page()

        await self.sleep(self.settings.results_delay_s)
        results = await self.extractor.extract(self.page)

        return SearchQueryResult(
            query=self.query,
            search_engine=self.kind,
            results=results,
        )

    async def dispose(self) -> None:
        """Close the browser. Close failures are logged, never raised."""
        try:
            await self.browser.release()
        except LaunchFailure as e:
            self.log.error(f"Failed to close browser instance: {e}")
        finally:
            self.page = None
            self.state = SessionState.UNINITIALIZED

    def _require_search_page(self) -> None:
        if self.state is not SessionState.SEARCH_ACTIVE:
            raise NotOnSearchPage("Not on search page. Please run search() first")

    async def _click_next_page_control(self) -> bool:
        control = self.profile.next_page_control
        if control is None:
            return False

        for element in await self.page.query_selector_all(control.selector):
            text = (await element.text_content() or "").strip()
            if control.text is None or text == control.text:
                await element.click()
                self.log.info(f"Clicked '{text or control.selector}'")
                return True
        return False
