"""
Helpers module - Reusable utilities for the SERP scraper.

Contains:
- Search URL construction
- Filename-safe query slugs
- Structured logging
"""

import re
import datetime
from typing import List
from urllib.parse import urlencode


# ============================================================================
# URL CONSTRUCTION
# ============================================================================

def construct_url(base_url: str, query: str, param: str = "q") -> str:
    """
    Build a search request URL from an endpoint and a raw query.

    Args:
        base_url: Search endpoint (e.g. 'https://www.google.com/search')
        query: Raw query string, percent-encoded here
        param: Name of the query parameter

    Returns:
        Request URL with the query appended
    """
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{urlencode({param: query})}"


_UNSAFE_CHARS_PATTERN = re.compile(r'[^A-Za-z0-9 _]')

def safe_query_slug(query: str) -> str:
    """Reduce a query to a filename-safe slug ('site:example.com' -> 'siteexamplecom')."""
    slug = _UNSAFE_CHARS_PATTERN.sub('', query).strip().replace(' ', '_')
    return slug or "query"


# ============================================================================
# STRUCTURED LOGGING
# ============================================================================

# Console prefix per level; debug lines are printed but never retained
_LEVEL_PREFIXES = {
    "INFO": "",
    "WARN": "⚠️ ",
    "ERROR": "❌ ",
    "OK": "✅ ",
    "DEBUG": "🔍 ",
}


class StructuredLogger:
    """
    Per-component logger that prints timestamped lines and keeps them.

    Sessions expose their logger so callers can inspect what happened during
    a search (e.g. a reported close failure) after the fact.
    """

    def __init__(self, component: str):
        self.component = component
        self.logs: List[str] = []

    def _emit(self, level: str, message: str, keep: bool = True) -> None:
        timestamp = datetime.datetime.now().strftime("%H:%M:%S")
        line = f"[{timestamp}] [{self.component}] {level}: {message}"
        print(f"{_LEVEL_PREFIXES[level]}{line}")
        if keep:
            self.logs.append(line)

    def info(self, message: str) -> None:
        self._emit("INFO", message)

    def warning(self, message: str) -> None:
        self._emit("WARN", message)

    def error(self, message: str) -> None:
        self._emit("ERROR", message)

    def success(self, message: str) -> None:
        self._emit("OK", message)

    def debug(self, message: str) -> None:
        self._emit("DEBUG", message, keep=False)

    def get_logs(self) -> List[str]:
        return self.logs
