"""
Sample catalog contents used by the demo script and optional API preload.
"""

import logging
from typing import Optional

from app.core.catalog.catalog import MovieCatalog

logger = logging.getLogger(__name__)

SAMPLE_MOVIES = [
    # (id, title, director, release_year, genre)
    ("1", "Inception", "Christopher Nolan", 2010, "Sci-Fi"),
    ("2", "Interstellar", "Christopher Nolan", 2014, "Sci-Fi"),
    ("3", "The Dark Knight", "Christopher Nolan", 2008, "Action"),
]

SAMPLE_RATINGS = [
    ("1", 5),
    ("1", 4),
    ("2", 5),
    ("3", 4),
]


def load_sample_catalog(catalog: Optional[MovieCatalog] = None) -> MovieCatalog:
    """
    Populate a catalog with the sample movies and ratings.

    Args:
        catalog: Catalog to fill (default: a new empty catalog)

    Returns:
        The populated catalog

    Raises:
        DuplicateIdError: If the catalog already holds one of the sample ids
    """
    if catalog is None:
        catalog = MovieCatalog()

    for movie_id, title, director, release_year, genre in SAMPLE_MOVIES:
        catalog.add_movie(movie_id, title, director, release_year, genre)
    for movie_id, rating in SAMPLE_RATINGS:
        catalog.rate_movie(movie_id, rating)

    logger.info(f"Loaded {len(SAMPLE_MOVIES)} sample movies")
    return catalog
