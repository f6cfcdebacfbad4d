from serp_scraper.core.schemas import EngineProfile, MarkerSpec, SearchEngineKind
from serp_scraper.engines.base import SearchSession


class GoogleSearch(SearchSession):
    """
    Google Search.

    Results load through continuous scrolling until Google shows a
    "More results" button; some layouts fall back to a numbered pagination
    table instead.
    """

    kind = SearchEngineKind.GOOGLE
    profile = EngineProfile(
        search_url="https://www.google.com/search",
        result_selector="a[data-ved]",
        result_container_selector="div.g",
        snippet_selector="div.VwiC3b",
        loading_marker=MarkerSpec(selector="span", text="More results"),
        pagination_selector="tbody",
        next_page_control=MarkerSpec(selector="span", text="More results"),
    )
