"""
Result extraction - Scrapes result anchors from the current DOM snapshot.
"""

from typing import List

from serp_scraper.core.browser_session import PageAutomation
from serp_scraper.core.schemas import EngineProfile, SearchResult
from serp_scraper.utils.constants import EXTRACT_RESULTS_SCRIPT


class ResultExtractor:
    """
    Turns the anchors matched by an engine's result selector into records.

    Read-only: running it twice against an unchanged page yields equal
    output. Records are neither deduplicated, sorted nor validated; relative
    or malformed URLs pass through as the DOM reports them.
    """

    def __init__(self, profile: EngineProfile):
        self.profile = profile

    async def extract(self, page: PageAutomation) -> List[SearchResult]:
        options = {
            "container": self.profile.result_container_selector,
            "snippet": self.profile.snippet_selector,
        }
        raw_links = await page.eval_on_selector_all(
            self.profile.result_selector,
            EXTRACT_RESULTS_SCRIPT,
            options,
        )
        return [
            SearchResult(
                title=link.get("title") or "",
                url=link.get("url") or "",
                description=link.get("description"),
                text=link.get("text") or "",
            )
            for link in raw_links or []
        ]
