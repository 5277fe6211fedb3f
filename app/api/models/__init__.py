"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.movie import (
    MovieCreate,
    MovieResponse,
    AverageRatingResponse,
    MessageResponse,
)
from app.api.models.rating import RatingCreate

__all__ = [
    "MovieCreate",
    "MovieResponse",
    "AverageRatingResponse",
    "MessageResponse",
    "RatingCreate",
]
