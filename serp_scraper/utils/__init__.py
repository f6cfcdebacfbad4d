"""Utility functions and constants."""

from serp_scraper.utils.helpers import construct_url, safe_query_slug, StructuredLogger

__all__ = ["construct_url", "safe_query_slug", "StructuredLogger"]
