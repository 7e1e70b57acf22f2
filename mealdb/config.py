"""
Configuration management for the Dessert Browser.

This module centralizes environment variable loading from the .env file at project root.
It is imported by the recipe service and by the Streamlit entry point so that .env is
loaded before anything reads the environment.

When no .env exists, load_dotenv() is a no-op and the process environment (or the
defaults below) is used instead.

Environment Variables:
- MEALDB_BASE_URL: Optional, defaults to "https://themealdb.com/api/json/v1/1"
- MEALDB_TIMEOUT_SECONDS: Optional, per-request timeout; unset means no timeout
- MEALDB_MAX_WORKERS: Optional, worker threads per state controller (default: 4)
- LOG_LEVEL: Optional, root logging level (default: "INFO")
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://themealdb.com/api/json/v1/1"
DEFAULT_MAX_WORKERS = 4
DEFAULT_LOG_LEVEL = "INFO"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    The project root is found by going up from this file's location
    (mealdb/config.py -> project root). Existing environment variables take
    precedence over values in the file.

    Safe to call multiple times.
    """
    project_root = Path(__file__).resolve().parent.parent
    env_path = project_root / ".env"
    load_dotenv(env_path, override=False)


# Load .env file on module import
load_env_file()


class MealDBConfig:
    """Configuration for the TheMealDB recipe service."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get the API base URL.

        Returns:
            Base URL with trailing slash removed (default: DEFAULT_BASE_URL)
        """
        url = os.getenv("MEALDB_BASE_URL") or DEFAULT_BASE_URL
        return url.rstrip("/")

    @staticmethod
    def get_timeout() -> Optional[float]:
        """
        Get the per-request timeout in seconds.

        Returns:
            Timeout as float, or None when unset or invalid (requests then waits indefinitely)
        """
        raw = os.getenv("MEALDB_TIMEOUT_SECONDS")
        if not raw:
            return None
        try:
            timeout = float(raw)
        except ValueError:
            logger.warning("Ignoring invalid MEALDB_TIMEOUT_SECONDS=%r", raw)
            return None
        if timeout <= 0:
            logger.warning("Ignoring non-positive MEALDB_TIMEOUT_SECONDS=%r", raw)
            return None
        return timeout

    @staticmethod
    def get_max_workers() -> int:
        """
        Get the number of worker threads a state controller may use.

        Returns:
            Positive integer (default: 4)
        """
        raw = os.getenv("MEALDB_MAX_WORKERS")
        if not raw:
            return DEFAULT_MAX_WORKERS
        try:
            workers = int(raw)
        except ValueError:
            logger.warning("Ignoring invalid MEALDB_MAX_WORKERS=%r", raw)
            return DEFAULT_MAX_WORKERS
        return workers if workers > 0 else DEFAULT_MAX_WORKERS


def get_log_level() -> str:
    """Get the configured log level name (default: "INFO")."""
    return (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def configure_logging() -> None:
    """
    Configure root logging from LOG_LEVEL.

    Unknown level names fall back to INFO.
    """
    level = getattr(logging, get_log_level(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
