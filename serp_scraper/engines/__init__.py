"""
Search engine implementations, one per SearchEngineKind.

- google: GoogleSearch
- bing: BingSearch
- duckduckgo: DuckDuckGoSearch
"""

from typing import Dict, Optional, Type, Union

from serp_scraper.config import ScraperSettings
from serp_scraper.core.schemas import SearchEngineKind
from serp_scraper.engines.base import SearchEngine, SearchSession
from serp_scraper.engines.bing import BingSearch
from serp_scraper.engines.duckduckgo import DuckDuckGoSearch
from serp_scraper.engines.google import GoogleSearch

ENGINES: Dict[SearchEngineKind, Type[SearchSession]] = {
    SearchEngineKind.GOOGLE: GoogleSearch,
    SearchEngineKind.BING: BingSearch,
    SearchEngineKind.DUCK_DUCK_GO: DuckDuckGoSearch,
}


def create_search_engine(
    kind: Union[SearchEngineKind, str],
    settings: Optional[ScraperSettings] = None,
    **kwargs,
) -> SearchSession:
    """
    Create an uninitialized session bound to an engine.

    Args:
        kind: Engine kind or its value (e.g. 'duck-duck-go')
        settings: Scraper settings passed to the session
        **kwargs: Forwarded to the session constructor (browser, sleep)

    Raises:
        ValueError: If kind names no known engine
    """
    return ENGINES[SearchEngineKind(kind)](settings=settings, **kwargs)


__all__ = [
    "ENGINES",
    "SearchEngine",
    "SearchSession",
    "GoogleSearch",
    "BingSearch",
    "DuckDuckGoSearch",
    "create_search_engine",
]
