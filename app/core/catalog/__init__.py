"""
In-memory movie catalog.

This package contains:
- The Movie record and its rating history
- The MovieCatalog collection and its query projections
- Typed catalog errors
- Sample data for demos and local runs
"""

from app.core.catalog.errors import (
    CatalogError,
    InvalidRatingError,
    DuplicateIdError,
    NotFoundError,
)
from app.core.catalog.models import Movie, MIN_RATING, MAX_RATING
from app.core.catalog.catalog import MovieCatalog
from app.core.catalog.seed import load_sample_catalog

__all__ = [
    'CatalogError',
    'InvalidRatingError',
    'DuplicateIdError',
    'NotFoundError',
    'Movie',
    'MIN_RATING',
    'MAX_RATING',
    'MovieCatalog',
    'load_sample_catalog',
]
