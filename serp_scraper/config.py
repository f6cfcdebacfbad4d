"""
Scraper settings.

Defaults come from the constants module; every value can be overridden
through environment variables (optionally from a .env file).
"""

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from serp_scraper.utils.constants import (
    SEARCH_RESULTS_SCROLL_COUNTER,
    DEFAULT_SETTLE_DELAY,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_RESULTS_DELAY,
    DEFAULT_NAVIGATION_TIMEOUT,
    DEFAULT_OUTPUT_DIR,
)


class ScraperSettings(BaseModel):
    """Tunables for browser launch, waits and scroll convergence."""
    headless: bool = True
    settle_delay_s: float = Field(default=DEFAULT_SETTLE_DELAY, ge=0)
    poll_interval_s: float = Field(default=DEFAULT_POLL_INTERVAL, ge=0)
    results_delay_s: float = Field(default=DEFAULT_RESULTS_DELAY, ge=0)
    scroll_counter: int = Field(default=SEARCH_RESULTS_SCROLL_COUNTER, ge=0)
    navigation_timeout_ms: int = Field(default=DEFAULT_NAVIGATION_TIMEOUT, gt=0)
    output_dir: str = DEFAULT_OUTPUT_DIR

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "ScraperSettings":
        """
        Build settings from SERP_* environment variables.

        Args:
            env_file: Optional path to a .env file. Defaults to the nearest .env
                found from the working directory upward. Variables already set in
                the environment win over the file.

        Returns:
            Settings with overrides applied
        """
        load_dotenv(env_file or find_dotenv(usecwd=True))

        overrides = {}
        env_map = {
            "SERP_HEADLESS": "headless",
            "SERP_SETTLE_DELAY": "settle_delay_s",
            "SERP_POLL_INTERVAL": "poll_interval_s",
            "SERP_RESULTS_DELAY": "results_delay_s",
            "SERP_SCROLL_COUNTER": "scroll_counter",
            "SERP_NAVIGATION_TIMEOUT": "navigation_timeout_ms",
            "SERP_OUTPUT_DIR": "output_dir",
        }
        for env_name, field_name in env_map.items():
            value = os.getenv(env_name)
            if value is not None and value.strip():
                overrides[field_name] = value.strip()

        return cls(**overrides)
