"""
API route handlers.
"""

from app.api.routers import movies, system

__all__ = ["movies", "system"]
