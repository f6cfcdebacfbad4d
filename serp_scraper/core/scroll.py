"""
Scroll convergence - Decides when lazily loaded results have finished arriving.

Results pages expose no "loading complete" event, so convergence is inferred
by polling a couple of DOM markers with a hard upper bound on attempts:

- loading marker present (empty text or not): more content may still load,
  keep scrolling and polling
- loading marker absent: content has plateaued, stop
- pagination selector present once the bound is reached: the page switched
  to numbered pagination, stop

Scheduling is check-then-poll: the marker read after the initial scroll is
checked before any sleep, so a page without a marker costs zero poll cycles
and a marker that never clears costs exactly ``scroll_counter`` cycles.
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

from serp_scraper.core.browser_session import PageAutomation
from serp_scraper.core.errors import ScrollError
from serp_scraper.core.schemas import MarkerSpec
from serp_scraper.utils.constants import (
    SEARCH_RESULTS_SCROLL_COUNTER,
    DEFAULT_POLL_INTERVAL,
    SCROLL_TO_BOTTOM_SCRIPT,
    FIND_MARKER_SCRIPT,
    ANY_ELEMENT_SCRIPT,
)
from serp_scraper.utils.helpers import StructuredLogger

Sleep = Callable[[float], Awaitable[None]]


class ConvergenceOutcome(Enum):
    PLATEAU = "plateau"
    PAGINATION = "pagination"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class ConvergenceReport:
    """Result of one convergence pass."""
    outcome: ConvergenceOutcome
    poll_cycles: int


class ScrollConvergenceDetector:
    """
    Bounded scroll-and-poll loop, parameterized by engine marker selectors.

    Args:
        loading_marker: Marker signalling that more content is pending.
            None means the engine never lazy-loads, so one scroll converges.
        pagination_selector: Selector whose presence means classic numbered
            pagination is active. None disables the check.
        scroll_counter: Maximum number of poll cycles.
        poll_interval: Seconds to sleep before each re-scroll.
        sleep: Awaitable sleep used between polls (injectable for tests).
    """

    def __init__(
        self,
        loading_marker: Optional[MarkerSpec] = None,
        pagination_selector: Optional[str] = None,
        scroll_counter: int = SEARCH_RESULTS_SCROLL_COUNTER,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        sleep: Sleep = asyncio.sleep,
    ):
        self.loading_marker = loading_marker
        self.pagination_selector = pagination_selector
        self.scroll_counter = scroll_counter
        self.poll_interval = poll_interval
        self.sleep = sleep
        self.log = StructuredLogger("ScrollConvergence")

    async def converge(self, page: PageAutomation) -> ConvergenceReport:
        """
        Scroll the page until results stop loading or the bound is reached.

        Args:
            page: Page to scroll

        Returns:
            ConvergenceReport with the terminal outcome and poll cycles spent

        Raises:
            ScrollError: If a scroll or DOM read fails; page state is then unknown.
        """
        try:
            await self.scroll_to_bottom(page)
            marker_text = await self.read_marker(page)

            attempts = 0
            while True:
                if marker_text is None:
                    outcome = ConvergenceOutcome.PLATEAU
                    break

                if attempts >= self.scroll_counter:
                    if await self.pagination_present(page):
                        outcome = ConvergenceOutcome.PAGINATION
                    else:
                        outcome = ConvergenceOutcome.EXHAUSTED
                    break

                if not marker_text.strip():
                    self.log.debug("Loading marker present without text, polling again")

                await self.sleep(self.poll_interval)
                await self.scroll_to_bottom(page)
                marker_text = await self.read_marker(page)
                attempts += 1
        except Exception as e:
            raise ScrollError(f"Scroll convergence failed: {e}") from e

        self.log.info(f"Converged: {outcome.value} after {attempts} poll cycle(s)")
        return ConvergenceReport(outcome=outcome, poll_cycles=attempts)

    async def scroll_to_bottom(self, page: PageAutomation) -> None:
        await page.evaluate(SCROLL_TO_BOTTOM_SCRIPT)

    async def read_marker(self, page: PageAutomation) -> Optional[str]:
        """Return the loading marker's text, or None when it is absent."""
        if self.loading_marker is None:
            return None
        return await page.eval_on_selector_all(
            self.loading_marker.selector,
            FIND_MARKER_SCRIPT,
            self.loading_marker.text,
        )

    async def pagination_present(self, page: PageAutomation) -> bool:
        if not self.pagination_selector:
            return False
        return bool(await page.eval_on_selector_all(self.pagination_selector, ANY_ELEMENT_SCRIPT))
