"""Core components: browser session, scroll convergence, extraction and schemas."""

from serp_scraper.core.browser_session import BrowserSession, PageAutomation, PageElement
from serp_scraper.core.errors import (
    SearchSessionError,
    LaunchFailure,
    InvalidQuery,
    NotInitialized,
    NotOnSearchPage,
    ScrollError,
)
from serp_scraper.core.extractor import ResultExtractor
from serp_scraper.core.schemas import (
    SearchEngineKind,
    SearchResult,
    SearchQueryResult,
    MarkerSpec,
    EngineProfile,
)
from serp_scraper.core.scroll import ScrollConvergenceDetector, ConvergenceOutcome, ConvergenceReport
from serp_scraper.core.state import SessionState

__all__ = [
    "BrowserSession",
    "PageAutomation",
    "PageElement",
    "SearchSessionError",
    "LaunchFailure",
    "InvalidQuery",
    "NotInitialized",
    "NotOnSearchPage",
    "ScrollError",
    "ResultExtractor",
    "SearchEngineKind",
    "SearchResult",
    "SearchQueryResult",
    "MarkerSpec",
    "EngineProfile",
    "ScrollConvergenceDetector",
    "ConvergenceOutcome",
    "ConvergenceReport",
    "SessionState",
]
