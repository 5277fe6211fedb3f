"""
HTTP client for the Movie Catalog API.
"""

from app.client import api_client

__all__ = ["api_client"]
