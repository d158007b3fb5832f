"""
App Config - runtime settings shared by the catalog handlers.

Values are resolved from environment variables first (tests/local dev) and
from Firebase params second (deployed functions), mirroring how API keys are
resolved by the auth services.
"""

import os

from firebase_functions.params import IntParam

from utils.get_logger import get_logger

logger = get_logger(__name__)

DEFAULT_CACHE_TIME = 7200  # 2 hours

# Cache duration (seconds) advertised to downstream caches via Cache-Control
CACHE_TIME = IntParam(
    "CACHE_TIME",
    default=DEFAULT_CACHE_TIME,
    description="max-age in seconds for catalog responses",
)


class AppConfig:
    """
    Configuration provider for the catalog handlers.

    Nothing is memoized: every lookup re-reads its source, so an updated
    CACHE_TIME takes effect on the next request.
    """

    def __init__(self, cache_time_param: IntParam = CACHE_TIME):
        self._cache_time_param = cache_time_param

    def get_cache_seconds(self) -> int:
        """Return the Cache-Control max-age in seconds."""
        raw = os.getenv("CACHE_TIME")
        if raw is None:
            try:
                raw = self._cache_time_param.value
            except Exception as e:
                logger.warning(f"CACHE_TIME param unavailable, using default: {e}")
                return DEFAULT_CACHE_TIME

        try:
            seconds = int(raw)
        except (TypeError, ValueError):
            logger.warning(f"Invalid CACHE_TIME {raw!r}, using default {DEFAULT_CACHE_TIME}")
            return DEFAULT_CACHE_TIME

        if seconds < 0:
            logger.warning(f"Negative CACHE_TIME {seconds}, using default {DEFAULT_CACHE_TIME}")
            return DEFAULT_CACHE_TIME
        return seconds


# Singleton instance for use across the application
app_config = AppConfig()
