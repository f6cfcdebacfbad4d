from serp_scraper.core.schemas import EngineProfile, MarkerSpec, SearchEngineKind
from serp_scraper.engines.base import SearchSession


class DuckDuckGoSearch(SearchSession):
    """DuckDuckGo. Results are appended below a "More results" button."""

    kind = SearchEngineKind.DUCK_DUCK_GO
    profile = EngineProfile(
        search_url="https://duckduckgo.com/",
        result_selector="a[data-testid='result-title-a']",
        result_container_selector="article[data-testid='result']",
        snippet_selector="div[data-result='snippet']",
        loading_marker=MarkerSpec(selector="button#more-results", text="More results"),
        next_page_control=MarkerSpec(selector="button#more-results", text="More results"),
    )
