"""
FastAPI dependency injection for the movie catalog.
"""

from fastapi import Request

from app.core.catalog import MovieCatalog


def get_catalog(request: Request) -> MovieCatalog:
    """Return the catalog owned by the running application."""
    return request.app.state.catalog
