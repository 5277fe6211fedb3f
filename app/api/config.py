"""
API configuration loaded from environment or defaults.
"""

import os


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))


def get_seed_sample() -> bool:
    """Whether to preload the sample movies on startup."""
    return os.getenv("CATALOG_SEED_SAMPLE", "").strip().lower() in ("1", "true", "yes", "on")
