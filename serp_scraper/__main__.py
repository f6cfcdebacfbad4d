"""
Command line entry point.

    USAGE: python -m serp_scraper "QUERY" [ENGINE] [PAGES]

ENGINE is one of google, bing, duck-duck-go (default: google).
"""

import sys
import asyncio
from typing import List, Optional

from serp_scraper.config import ScraperSettings
from serp_scraper.core.schemas import SearchEngineKind
from serp_scraper.runner import run_search
from serp_scraper.utils.export import save_results_csv


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(__doc__)
        return 2

    query = args[0]
    engine = args[1] if len(args) > 1 else SearchEngineKind.GOOGLE.value
    try:
        kind = SearchEngineKind(engine)
        pages = int(args[2]) if len(args) > 2 else 1
    except ValueError as e:
        print(f"FAILED: {e}")
        return 2

    settings = ScraperSettings.from_env()
    print(f"[INFO] Searching {kind.value} for '{query}' ({pages} page(s))")

    try:
        result = asyncio.run(run_search(kind, query, pages=pages, settings=settings))
    except Exception as e:
        print(f"FAILED: {e}")
        return 1

    for i, record in enumerate(result.results, start=1):
        print(f"{i:3}. {record.title.strip()[:80]}")
        print(f"     {record.url}")

    filepath = save_results_csv(result, settings.output_dir)
    if filepath:
        print(f"SUCCESS: Extracted {len(result.results)} results to {filepath}")
    else:
        print("SUCCESS: No results found for the given query.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
