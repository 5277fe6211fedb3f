"""
Unit tests for the Movie record.
"""

import pytest

from app.core.catalog import Movie, InvalidRatingError


@pytest.fixture
def movie():
    return Movie(
        id="1",
        title="Inception",
        director="Christopher Nolan",
        release_year=2010,
        genre="Sci-Fi",
    )


class TestMovieRatings:
    """Tests for add_rating and average_rating."""

    @pytest.mark.parametrize("rating", [1, 2, 3, 4, 5])
    def test_add_valid_rating(self, movie, rating):
        movie.add_rating(rating)
        assert movie.ratings == [rating]
        assert movie.rating_count == 1

    @pytest.mark.parametrize("rating", [0, 6, -1, 100, 2.5, "3", True, None])
    def test_add_invalid_rating(self, movie, rating):
        """Out-of-range ratings are rejected and leave history unchanged."""
        movie.add_rating(3)
        with pytest.raises(InvalidRatingError) as exc_info:
            movie.add_rating(rating)
        assert exc_info.value.rating == rating
        assert movie.ratings == [3]

    def test_ratings_keep_submission_order(self, movie):
        for rating in (2, 5, 1, 4):
            movie.add_rating(rating)
        assert movie.ratings == [2, 5, 1, 4]

    def test_average_rating_unrated(self, movie):
        assert movie.average_rating() is None

    def test_average_rating(self, movie):
        movie.add_rating(5)
        movie.add_rating(4)
        assert movie.average_rating() == 4.5

    def test_new_movies_do_not_share_ratings(self):
        a = Movie("a", "A", "D", 2000, "Drama")
        b = Movie("b", "B", "D", 2000, "Drama")
        a.add_rating(5)
        assert b.ratings == []


class TestMovieSerialization:

    def test_to_dict_uses_camel_case(self, movie):
        movie.add_rating(4)
        assert movie.to_dict() == {
            "id": "1",
            "title": "Inception",
            "director": "Christopher Nolan",
            "releaseYear": 2010,
            "genre": "Sci-Fi",
            "ratings": [4],
        }
