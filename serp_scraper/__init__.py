"""
SERP Scraper - Search engine results scraping in a headless browser.

Core workflow: launch browser → search → scroll until results converge →
extract result links → dispose.
"""

from serp_scraper.config import ScraperSettings
from serp_scraper.core.schemas import SearchEngineKind, SearchResult, SearchQueryResult
from serp_scraper.core.state import SessionState
from serp_scraper.engines import (
    SearchEngine,
    SearchSession,
    GoogleSearch,
    BingSearch,
    DuckDuckGoSearch,
    create_search_engine,
)
from serp_scraper.runner import run_search


__version__ = "1.0.0"
__all__ = [
    "ScraperSettings",
    "SearchEngineKind",
    "SearchResult",
    "SearchQueryResult",
    "SessionState",
    "SearchEngine",
    "SearchSession",
    "GoogleSearch",
    "BingSearch",
    "DuckDuckGoSearch",
    "create_search_engine",
    "run_search",
]
