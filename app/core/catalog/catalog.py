"""
In-memory movie catalog.

Provides create, rate, lookup, filter and delete operations over a
mapping of movie id to Movie. The catalog holds no global state: callers
construct an instance and own its lifecycle. It is not safe for
uncoordinated concurrent mutation; hosts must serialize add, rate and
remove calls per instance.
"""

import logging
from typing import Dict, List, Optional

from app.core.catalog.errors import DuplicateIdError, NotFoundError
from app.core.catalog.models import Movie

logger = logging.getLogger(__name__)


class MovieCatalog:
    """
    Collection of Movie records keyed by id.

    Iteration order is insertion order. Query projections (genre,
    director, keyword, top rated) return movies in that order unless
    they sort explicitly.

    Usage:
        catalog = MovieCatalog()
        catalog.add_movie("1", "Inception", "Christopher Nolan", 2010, "Sci-Fi")
        catalog.rate_movie("1", 5)
        catalog.top_rated_movies()
    """

    def __init__(self):
        self._movies: Dict[str, Movie] = {}

    def __len__(self) -> int:
        return len(self._movies)

    def __contains__(self, movie_id: object) -> bool:
        return movie_id in self._movies

    # ==================== MUTATIONS ====================

    def add_movie(
        self,
        id: str,
        title: str,
        director: str,
        release_year: int,
        genre: str,
    ) -> None:
        """
        Add a new, unrated movie.

        Args:
            id: Unique movie identifier
            title: Movie title
            director: Director name
            release_year: Year of release
            genre: Genre label

        Raises:
            DuplicateIdError: If a movie with this id already exists
        """
        if id in self._movies:
            logger.warning(f"Rejected duplicate movie id: {id}")
            raise DuplicateIdError(id)

        self._movies[id] = Movie(
            id=id,
            title=title,
            director=director,
            release_year=release_year,
            genre=genre,
        )
        logger.info(f"Added movie {id}: {title} ({release_year})")

    def rate_movie(self, id: str, rating: int) -> None:
        """
        Record a rating for a movie.

        Args:
            id: Movie identifier
            rating: Rating value in [1, 5]

        Raises:
            NotFoundError: If the movie does not exist
            InvalidRatingError: If the rating is out of range
        """
        movie = self._movies.get(id)
        if movie is None:
            logger.warning(f"Cannot rate missing movie: {id}")
            raise NotFoundError(id)

        movie.add_rating(rating)
        logger.info(f"Rated movie {id}: {rating} (count={movie.rating_count})")

    def remove_movie(self, id: str) -> bool:
        """
        Delete a movie.

        Returns:
            True if the movie existed and was removed, False otherwise
        """
        if self._movies.pop(id, None) is None:
            logger.debug(f"Remove skipped, movie not found: {id}")
            return False
        logger.info(f"Removed movie {id}")
        return True

    def clear(self) -> None:
        """Remove every movie."""
        count = len(self._movies)
        self._movies.clear()
        logger.info(f"Cleared {count} movies")

    # ==================== QUERIES ====================

    def get_movie(self, id: str) -> Optional[Movie]:
        """Look up a movie by id, returning None when absent."""
        return self._movies.get(id)

    def list_movies(self) -> List[Movie]:
        """All movies in insertion order."""
        return list(self._movies.values())

    def average_rating(self, id: str) -> Optional[float]:
        """
        Average rating of a movie.

        Returns:
            The mean rating, or None when the movie is missing or unrated
        """
        movie = self._movies.get(id)
        if movie is None:
            return None
        return movie.average_rating()

    def top_rated_movies(self, limit: Optional[int] = None) -> List[Movie]:
        """
        Rated movies ordered by average rating, highest first.

        Unrated movies are excluded. Movies with equal averages keep
        their insertion order.

        Args:
            limit: Maximum number of movies to return (default: all)

        Returns:
            List of Movie objects

        Raises:
            ValueError: If limit is given and less than 1
        """
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit}")

        rated = [movie for movie in self._movies.values() if movie.ratings]
        rated.sort(key=lambda movie: movie.average_rating(), reverse=True)
        if limit is not None:
            rated = rated[:limit]
        return rated

    def movies_by_genre(self, genre: str) -> List[Movie]:
        """Movies whose genre matches exactly, ignoring case."""
        wanted = genre.lower()
        return [movie for movie in self._movies.values() if movie.genre.lower() == wanted]

    def movies_by_director(self, director: str) -> List[Movie]:
        """Movies whose director matches exactly, ignoring case."""
        wanted = director.lower()
        return [movie for movie in self._movies.values() if movie.director.lower() == wanted]

    def search_by_keyword(self, keyword: str) -> List[Movie]:
        """Movies whose title contains the keyword, ignoring case."""
        needle = keyword.lower()
        return [movie for movie in self._movies.values() if needle in movie.title.lower()]
