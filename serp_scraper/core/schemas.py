from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class SearchEngineKind(str, Enum):
    """Search engines a session can be bound to."""
    GOOGLE = "google"
    BING = "bing"
    DUCK_DUCK_GO = "duck-duck-go"


class SearchResult(BaseModel):
    """A single result anchor scraped from a results page."""
    title: str = Field(description="Visible text of the anchor's parent node")
    url: str = Field(description="Resolved link target of the anchor, passed through unvalidated")
    description: Optional[str] = Field(default=None, description="Snippet text of the surrounding result block, if the engine exposes one")
    text: Optional[str] = Field(default=None, description="Visible text of the anchor itself")


class SearchQueryResult(BaseModel):
    """Snapshot of the results currently on the page for a query."""
    query: str
    search_engine: SearchEngineKind
    results: List[SearchResult] = Field(default_factory=list)


@dataclass(frozen=True)
class MarkerSpec:
    """
    A DOM text fragment used as a heuristic signal.

    Attributes:
        selector: CSS selector of candidate elements.
        text: Exact (trimmed) text the element must carry. None matches the
            first element found by the selector.
    """
    selector: str
    text: Optional[str] = None


@dataclass(frozen=True)
class EngineProfile:
    """Engine-specific navigation target and DOM selectors."""
    search_url: str
    result_selector: str
    query_param: str = "q"
    result_container_selector: Optional[str] = None
    snippet_selector: Optional[str] = None
    loading_marker: Optional[MarkerSpec] = None
    pagination_selector: Optional[str] = None
    next_page_control: Optional[MarkerSpec] = None
    # True when more results are appended to the same page, False when
    # the next page control navigates to a fresh page
    appends_results: bool = True
