from serp_scraper.core.schemas import EngineProfile, MarkerSpec, SearchEngineKind
from serp_scraper.engines.base import SearchSession


class BingSearch(SearchSession):
    """Bing. Classic numbered pagination, no lazy loading."""

    kind = SearchEngineKind.BING
    profile = EngineProfile(
        search_url="https://www.bing.com/search",
        result_selector="li.b_algo h2 > a[h]",
        result_container_selector="li.b_algo",
        snippet_selector="div.b_caption p",
        pagination_selector="nav[role='navigation'] ul.sb_pagF",
        next_page_control=MarkerSpec(selector="a.sb_pagN"),
        appends_results=False,
    )
