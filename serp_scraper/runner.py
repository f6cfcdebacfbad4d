"""
Runner - Drives one search session from launch to dispose.
"""

from typing import Optional, Union

from serp_scraper.config import ScraperSettings
from serp_scraper.core.schemas import SearchEngineKind, SearchQueryResult
from serp_scraper.engines import create_search_engine
from serp_scraper.utils.helpers import StructuredLogger


async def run_search(
    kind: Union[SearchEngineKind, str],
    query: str,
    pages: int = 1,
    settings: Optional[ScraperSettings] = None,
    **session_kwargs,
) -> SearchQueryResult:
    """
    Search a query and collect results across several pages.

    The browser is always disposed, even when a step fails.

    Args:
        kind: Engine to search with
        query: Query string
        pages: Number of result pages to collect (at least 1)
        settings: Scraper settings
        **session_kwargs: Forwarded to the session (browser, sleep)

    Returns:
        Results of every page, in page order
    """
    log = StructuredLogger("Runner")
    session = create_search_engine(kind, settings=settings, **session_kwargs)

    async with session:
        await session.search(query)
        result = await session.get_results()
        log.info(f"Page 1: {len(result.results)} result(s)")

        for page_number in range(2, max(pages, 1) + 1):
            page_results = await session.next_page()
            if session.profile.appends_results:
                # Earlier pages are still in the DOM, keep only what is new
                new_results = page_results[len(result.results):]
            else:
                new_results = page_results
            log.info(f"Page {page_number}: {len(new_results)} new result(s)")
            result.results.extend(new_results)

    return result
