"""API configuration adapter.

Bridges the centralized usermanagement_config settings with the API layer.
"""

from functools import lru_cache

from usermanagement_config.settings import Settings, get_settings

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"


@lru_cache
def get_api_settings() -> Settings:
    """Get settings from centralized configuration."""
    return get_settings()
