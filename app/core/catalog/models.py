"""
Movie record held by the catalog.

A Movie carries its descriptive fields plus the ordered history of
ratings it has received. Ratings are only ever appended.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from app.core.catalog.errors import InvalidRatingError

MIN_RATING = 1
MAX_RATING = 5


@dataclass
class Movie:
    """
    One film and its accumulated ratings.

    Attributes:
        id: Caller-supplied unique identifier
        title: Movie title
        director: Director name
        release_year: Year of release
        genre: Genre label (free text)
        ratings: Ratings in submission order, each within [1, 5]
    """

    id: str
    title: str
    director: str
    release_year: int
    genre: str
    ratings: List[int] = field(default_factory=list)

    def add_rating(self, rating: int) -> None:
        """
        Append a rating to the history.

        Raises:
            InvalidRatingError: If rating is not an integer in [1, 5]
        """
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise InvalidRatingError(rating)
        if rating < MIN_RATING or rating > MAX_RATING:
            raise InvalidRatingError(rating)
        self.ratings.append(rating)

    def average_rating(self) -> Optional[float]:
        """Mean of all ratings, or None when the movie is unrated."""
        if not self.ratings:
            return None
        return sum(self.ratings) / len(self.ratings)

    @property
    def rating_count(self) -> int:
        return len(self.ratings)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase field names of the HTTP API."""
        return {
            "id": self.id,
            "title": self.title,
            "director": self.director,
            "releaseYear": self.release_year,
            "genre": self.genre,
            "ratings": list(self.ratings),
        }
