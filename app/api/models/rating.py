"""
Pydantic schemas for Rating API.
"""

from pydantic import BaseModel


class RatingCreate(BaseModel):
    """Request body for rating a movie.

    The 1-5 range is enforced by the catalog so that an unknown movie
    reports 404 before the rating value is checked.
    """

    rating: int
