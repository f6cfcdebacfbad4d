import csv

import pytest

from serp_scraper.core.schemas import SearchEngineKind, SearchQueryResult, SearchResult
from serp_scraper.utils.export import save_results_csv
from serp_scraper.utils.helpers import StructuredLogger, construct_url, safe_query_slug


@pytest.mark.parametrize("base,query,param,expected", [
    ("https://www.google.com/search", "site:example.com", "q", "https://www.google.com/search?q=site%3Aexample.com"),
    ("https://www.bing.com/search", "python asyncio", "q", "https://www.bing.com/search?q=python+asyncio"),
    ("https://duckduckgo.com/", "a&b=c", "q", "https://duckduckgo.com/?q=a%26b%3Dc"),
    ("https://example.com/search?hl=en", "café", "query", "https://example.com/search?hl=en&query=caf%C3%A9"),
])
def test_construct_url(base, query, param, expected):
    assert construct_url(base, query, param) == expected


def test_safe_query_slug():
    assert safe_query_slug("site:example.com") == "siteexamplecom"
    assert safe_query_slug("python asyncio tips") == "python_asyncio_tips"
    assert safe_query_slug("???") == "query"


def test_structured_logger_keeps_all_but_debug(capsys):
    log = StructuredLogger("Search")
    log.info("started")
    log.debug("noise")
    log.warning("slow")
    log.error("broken")
    log.success("done")

    logs = log.get_logs()
    assert len(logs) == 4
    assert "[Search] INFO: started" in logs[0]
    assert "WARN: slow" in logs[1]
    assert "noise" in capsys.readouterr().out


def test_save_results_csv(tmp_path):
    result = SearchQueryResult(
        query="site:example.com",
        search_engine=SearchEngineKind.GOOGLE,
        results=[
            SearchResult(title="One", url="https://example.com/1", text="One"),
            SearchResult(title="Two", url="https://example.com/2", description="Second page"),
        ],
    )

    filepath = save_results_csv(result, str(tmp_path / "data"))

    assert filepath is not None
    assert "google_siteexamplecom_" in filepath
    with open(filepath, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["url"] for row in rows] == ["https://example.com/1", "https://example.com/2"]
    assert rows[1]["description"] == "Second page"
    assert set(rows[0]) == {"title", "url", "description", "text"}


def test_save_results_csv_skips_empty_results(tmp_path):
    result = SearchQueryResult(query="nothing", search_engine=SearchEngineKind.BING)

    assert save_results_csv(result, str(tmp_path)) is None
    assert list(tmp_path.iterdir()) == []


def test_structured_logger_prefixes_console_lines_by_level(capsys):
    log = StructuredLogger("BrowserSession")
    log.error("Failed to close browser instance")
    log.success("Browser launched")

    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("❌ [")
    assert out[1].startswith("✅ [")
    # Retained lines carry no console prefix
    assert log.get_logs()[0].startswith("[")
    assert log.get_logs()[0].endswith("[BrowserSession] ERROR: Failed to close browser instance")
