"""
Export module - Persists extracted search results.
"""

import os
import csv
import datetime
from typing import Optional

from serp_scraper.core.schemas import SearchQueryResult
from serp_scraper.utils.constants import CSV_COLUMNS
from serp_scraper.utils.helpers import safe_query_slug


def save_results_csv(result: SearchQueryResult, output_dir: str) -> Optional[str]:
    """
    Write a query's results to a timestamped CSV file.

    Args:
        result: Results to save
        output_dir: Directory for the file (created if missing)

    Returns:
        Path of the written file, or None when there were no results
    """
    if not result.results:
        return None

    os.makedirs(output_dir, exist_ok=True)

    timestamp = datetime.datetime.now().strftime('%Y%m%d_%H%M%S')
    filename = f"{result.search_engine.value}_{safe_query_slug(result.query)}_{timestamp}.csv"
    filepath = os.path.join(output_dir, filename)

    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for record in result.results:
            writer.writerow(record.model_dump(include=set(CSV_COLUMNS)))

    return filepath
