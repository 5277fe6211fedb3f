"""
Pydantic schemas for Movie API.

Wire field names are camelCase (releaseYear, averageRating); Python
attributes stay snake_case.
"""

from pydantic import BaseModel, Field

from app.core.catalog import Movie


class MovieCreate(BaseModel):
    """Request body for adding a movie. Every field is required."""

    id: str = Field(..., min_length=1)
    title: str
    director: str
    release_year: int = Field(..., alias="releaseYear")
    genre: str

    class Config:
        populate_by_name = True


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: str
    title: str
    director: str
    release_year: int = Field(..., alias="releaseYear")
    genre: str
    ratings: list[int]
    average_rating: float | None = Field(None, alias="averageRating")

    class Config:
        populate_by_name = True

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieResponse":
        return cls(
            id=movie.id,
            title=movie.title,
            director=movie.director,
            release_year=movie.release_year,
            genre=movie.genre,
            ratings=list(movie.ratings),
            average_rating=movie.average_rating(),
        )


class AverageRatingResponse(BaseModel):
    """Average rating of one movie; null when missing or unrated."""

    average_rating: float | None = Field(None, alias="averageRating")

    class Config:
        populate_by_name = True


class MessageResponse(BaseModel):
    message: str
